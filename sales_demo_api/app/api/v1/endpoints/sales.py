"""
Sales endpoints for API v1.

``GET /sales/`` lists the dataset in generation order, ``POST
/sales/search`` runs free-text and filtered searches and ``POST
/sales/fetch`` retrieves full records by id.  Request bodies are
validated by the pydantic schemas before the service is called, so
invalid input is answered with HTTP 422 and never reaches the query
engine.  Unknown ids and empty searches are not errors.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sales_demo_api.app.core.store import SalesStore, get_sales_store
from sales_demo_api.app.schemas.sale import (
    FetchRequest,
    FetchResponse,
    ListSalesResponse,
    SearchRequest,
    SearchResponse,
)
from sales_demo_api.app.services.response_builder import (
    build_fetch_payload,
    build_list_payload,
    build_search_payload,
)
from sales_demo_api.app.services.sales_service import SalesService

router = APIRouter()


def get_sales_service(store: SalesStore = Depends(get_sales_store)) -> SalesService:
    return SalesService(store)


@router.get("/", response_model=ListSalesResponse)
async def list_sales(
    count: Optional[int] = Query(None, ge=1, description="Number of records to return (default: all)"),
    service: SalesService = Depends(get_sales_service),
) -> ListSalesResponse:
    """Return the first ``count`` pre-generated sales.

    ``count`` must lie between 1 and the dataset size; HTTP 422 is
    returned otherwise.
    """
    available = len(service.store)
    if count is not None and count > available:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"count must be between 1 and {available}",
        )
    return build_list_payload(service.list_sales(count))


@router.post("/search", response_model=SearchResponse)
async def search_sales(
    search_in: SearchRequest,
    service: SalesService = Depends(get_sales_service),
) -> SearchResponse:
    """Search sales by free text and exact filters.

    The text is matched case-insensitively against customer, product,
    region and status.  All filters must hold for a record to match.
    """
    result = service.search(search_in.query, filters=search_in.filters, limit=search_in.limit)
    return build_search_payload(result, search_in, service.locator)


@router.post("/fetch", response_model=FetchResponse, response_model_exclude_none=True)
async def fetch_sales(
    fetch_in: FetchRequest,
    service: SalesService = Depends(get_sales_service),
) -> FetchResponse:
    """Retrieve full sale records by id.

    Ids (or search result locators) that match no record are listed
    under ``missing``; the request still succeeds.
    """
    result = service.fetch(fetch_in.id, fetch_in.ids)
    return build_fetch_payload(result)
