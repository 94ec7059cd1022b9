"""
Dataset resource endpoint for API v1.

Returns the whole synthetic dataset in one document, together with
the locator that search results reference.
"""

from fastapi import APIRouter, Depends

from sales_demo_api.app.core.store import SalesStore, get_sales_store
from sales_demo_api.app.schemas.sale import DatasetResponse
from sales_demo_api.app.services.response_builder import build_dataset_payload

router = APIRouter()


@router.get("/", response_model=DatasetResponse)
async def get_dataset(store: SalesStore = Depends(get_sales_store)) -> DatasetResponse:
    """Return every record of the dataset."""
    return build_dataset_payload(store)
