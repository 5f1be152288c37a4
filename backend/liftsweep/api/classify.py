"""Classification API endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select, func, desc
from sqlalchemy.ext.asyncio import AsyncSession

from liftsweep.api.library import get_library
from liftsweep.config import get_settings
from liftsweep.database import get_db
from liftsweep.knn import ActionClassifier, BinIndexError, ReferenceLibrary, format_action, parse_record
from liftsweep.models.classification import ClassificationRecord
from liftsweep.schemas.classification import (
    ClassifyRequest,
    ClassificationResponse,
    ClassificationHistoryItem,
    ClassificationListResponse,
)

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


@router.post("", response_model=ClassificationResponse)
async def classify_record(
    payload: ClassifyRequest,
    library: ReferenceLibrary = Depends(get_library),
    db: AsyncSession = Depends(get_db)
):
    """
    Classify one record as lift or sweep.

    Every (joint, bin) sample votes for the category of its nearest
    reference sample; the majority wins.
    """
    action = parse_record(payload.record).to_action()
    if len(action) == 0:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Record holds no complete (velocity, position, effort) sample"
        )

    try:
        result = ActionClassifier(library).evaluate(action)
    except BinIndexError as e:
        logger.warning(f"Action does not fit the reference library: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Action does not fit the reference library: {e}"
        )

    record_id = None
    if settings.store_classifications:
        record = ClassificationRecord(
            label=result.label,
            sample_count=len(action),
            coordinates=result.coordinates
        )
        record.votes = result.votes
        db.add(record)
        await db.commit()
        record_id = record.id

    return ClassificationResponse(
        id=record_id,
        label=result.label,
        votes=result.votes,
        coordinates=result.coordinates,
        sample_count=len(action),
        line=format_action(action, result.label)
    )


@router.get("/history", response_model=ClassificationListResponse)
async def classification_history(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    label: Optional[str] = None,
    db: AsyncSession = Depends(get_db)
):
    """List stored classifications with pagination."""
    query = select(ClassificationRecord)
    count_query = select(func.count(ClassificationRecord.id))

    if label:
        query = query.where(ClassificationRecord.label == label)
        count_query = count_query.where(ClassificationRecord.label == label)

    total_result = await db.execute(count_query)
    total = total_result.scalar()

    offset = (page - 1) * page_size
    query = query.order_by(desc(ClassificationRecord.created_at)).offset(offset).limit(page_size)

    result = await db.execute(query)
    records = result.scalars().all()

    return ClassificationListResponse(
        items=[ClassificationHistoryItem.model_validate(r) for r in records],
        total=total,
        page=page,
        page_size=page_size,
        has_more=(offset + len(records)) < total
    )
