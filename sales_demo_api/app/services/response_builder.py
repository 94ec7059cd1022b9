"""
Response envelopes for the sales operations.

Every envelope carries the disclaimer note from the settings and a
short human-readable ``summary`` sentence next to the structured
payload.
"""

from datetime import datetime, timezone
from typing import Callable, List

from sales_demo_api.app.core.config import settings
from sales_demo_api.app.core.store import SalesStore
from sales_demo_api.app.schemas.sale import (
    DatasetResponse,
    FetchResponse,
    ListSalesResponse,
    SaleRecord,
    SearchHit,
    SearchQueryEcho,
    SearchRequest,
    SearchResponse,
)
from sales_demo_api.app.services.sales_service import FetchResult, ListResult, SearchResult


def _now() -> datetime:
    return datetime.now(timezone.utc)


def build_list_payload(result: ListResult) -> ListSalesResponse:
    return ListSalesResponse(
        generated_at=_now(),
        total=len(result.records),
        records=list(result.records),
        note=settings.data_note,
        limit=result.limit,
        total_available=result.total_available,
        summary=f"Returning {len(result.records)} synthetic records (max {result.total_available}).",
    )


def build_dataset_payload(store: SalesStore) -> DatasetResponse:
    return DatasetResponse(
        generated_at=_now(),
        total=len(store),
        records=list(store.records),
        note=settings.data_note,
        total_available=len(store),
        uri=settings.resource_uri,
    )


def search_hit(record: SaleRecord, uri: str) -> SearchHit:
    """Condense a record into a search result entry."""
    return SearchHit(
        id=record.id,
        title=f"{record.customer_name} · {record.product_name}",
        snippet=f"Status {record.status} · Total USD {record.total_amount:.2f} · Region {record.region}",
        uri=uri,
    )


def build_search_payload(
    result: SearchResult,
    request: SearchRequest,
    locator: Callable[[str], str],
) -> SearchResponse:
    """Build the search envelope; ``locator`` maps a record id to its result uri."""
    hits = [search_hit(record, locator(record.id)) for record in result.matches]
    if hits:
        summary = f"Matches found: {result.total_matches}. Returning the first {len(hits)}."
    else:
        summary = "No sales matched the requested filters."
    echoed_filters = None
    if request.filters is not None:
        echoed_filters = request.filters.model_dump(by_alias=True, exclude_none=True)
    return SearchResponse(
        results=hits,
        total_matches=result.total_matches,
        returned=len(hits),
        note=settings.data_note,
        query=SearchQueryEcho(query=request.query, filters=echoed_filters, limit=request.limit),
        summary=summary,
    )


def build_fetch_payload(result: FetchResult) -> FetchResponse:
    parts: List[str] = []
    if result.records:
        parts.append(f"Returned {len(result.records)} requested record(s).")
    if result.missing:
        parts.append(f"IDs not found: {', '.join(result.missing)}.")
    return FetchResponse(
        records=list(result.records),
        missing=list(result.missing) or None,
        note=settings.data_note,
        summary=" ".join(parts),
    )
