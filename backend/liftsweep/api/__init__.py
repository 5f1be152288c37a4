"""API routes."""

from fastapi import APIRouter

from liftsweep.api import library, classify

api_router = APIRouter()

api_router.include_router(library.router, prefix="/library", tags=["Reference Library"])
api_router.include_router(classify.router, prefix="/classify", tags=["Classification"])
