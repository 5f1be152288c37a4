"""Reference library API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftsweep.config import get_settings
from liftsweep.database import AsyncSessionLocal, get_db
from liftsweep.knn import (
    Category, JOINTS_PER_BIN, ReferenceLibrary, iter_dataset_lines, parse_record
)
from liftsweep.models.recording import ReferenceRecording, RecordingSource
from liftsweep.schemas.recording import LibrarySummary, RecordingCreate, RecordingResponse

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


async def load_reference_library() -> ReferenceLibrary:
    """Build the live library from the training file and stored recordings."""
    try:
        library = ReferenceLibrary.from_file(
            settings.training_data_path,
            require_complete_bins=settings.require_complete_bins
        )
    except FileNotFoundError:
        logger.warning(f"Training data not found at {settings.training_data_path}, starting without it")
        library = ReferenceLibrary(require_complete_bins=settings.require_complete_bins)

    async with AsyncSessionLocal() as session:
        result = await session.execute(
            select(ReferenceRecording).order_by(ReferenceRecording.created_at)
        )
        stored = library.extend((r.to_action(), r.label) for r in result.scalars())

    logger.info(f"Reference library ready: {library!r} ({stored} from database)")
    return library


def get_library(request: Request) -> ReferenceLibrary:
    """Dependency for the live reference library."""
    return request.app.state.library


@router.get("", response_model=LibrarySummary)
async def library_summary(library: ReferenceLibrary = Depends(get_library)):
    """Number of reference actions per category."""
    return LibrarySummary(
        lifts=len(library.lifts),
        sweeps=len(library.sweeps),
        total=len(library),
        max_bins=library.max_bins,
        joints_per_bin=JOINTS_PER_BIN
    )


@router.get("/export", response_class=PlainTextResponse)
async def export_library(library: ReferenceLibrary = Depends(get_library)):
    """The whole library as record lines: lifts first, then sweeps."""
    return "".join(iter_dataset_lines(library))


@router.post("/records", response_model=RecordingResponse, status_code=status.HTTP_201_CREATED)
async def add_record(
    payload: RecordingCreate,
    library: ReferenceLibrary = Depends(get_library),
    db: AsyncSession = Depends(get_db)
):
    """
    Add a labeled record to the reference library.

    The record is stored and becomes part of the live library immediately.
    """
    parsed = parse_record(payload.record)

    if parsed.label not in Category.all():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid label {parsed.label!r}. Must be one of: {Category.all()}"
        )

    action = parsed.to_action()
    if len(action) == 0:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Record holds no complete (velocity, position, effort) sample"
        )
    if library.require_complete_bins and not action.is_complete:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Record has {len(action)} samples, expected a multiple of {JOINTS_PER_BIN}"
        )

    recording = ReferenceRecording.from_action(
        action, parsed.label, source=RecordingSource.API, note=payload.note
    )
    db.add(recording)
    await db.commit()
    await db.refresh(recording)

    library.add(action, parsed.label)
    logger.info(f"Added {parsed.label} recording {recording.id} ({len(action)} samples)")

    return RecordingResponse.model_validate(recording)
