"""
Top-level router for version 1 of the API.

Aggregates the sales operations and the dataset resource under a
common prefix.
"""

from fastapi import APIRouter

from .endpoints import dataset, sales

router = APIRouter()

router.include_router(sales.router, prefix="/sales", tags=["sales"])
router.include_router(dataset.router, prefix="/dataset", tags=["dataset"])
