"""
Query engine over a ``SalesStore``.

``SalesService`` implements the three read operations exposed by the
API:

* :meth:`SalesService.list_sales` – the first ``count`` records in
  generation order, clamped to the dataset size;
* :meth:`SalesService.search` – conjunctive structured filters plus a
  case-insensitive substring match over customer, product, region and
  status;
* :meth:`SalesService.fetch` – resolution of one or more ids, split
  into found records and missing ids.

All methods are synchronous and side-effect free.  They raise
``ValueError`` only for malformed input; unknown ids and empty result
sets are ordinary results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from sales_demo_api.app.core.config import settings
from sales_demo_api.app.core.store import SalesStore
from sales_demo_api.app.schemas.sale import MAX_EXTRA_IDS, MAX_SEARCH_LIMIT, SaleRecord, SearchFilters

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 20


@dataclass(frozen=True)
class ListResult:
    records: Tuple[SaleRecord, ...]
    limit: int
    total_available: int


@dataclass(frozen=True)
class SearchResult:
    matches: Tuple[SaleRecord, ...]
    total_matches: int


@dataclass(frozen=True)
class FetchResult:
    records: Tuple[SaleRecord, ...]
    missing: Tuple[str, ...]


def search_text(record: SaleRecord) -> str:
    """Lowercase projection of a record that free-text queries match against."""
    return f"{record.customer_name} {record.product_name} {record.region} {record.status}".lower()


def matches_filters(record: SaleRecord, filters: Optional[SearchFilters]) -> bool:
    """Return ``True`` if ``record`` satisfies every supplied filter."""
    if filters is None:
        return True
    # Empty strings are treated like absent filters.
    if filters.customer and record.customer_name != filters.customer:
        return False
    if filters.product and record.product_name != filters.product:
        return False
    if filters.region and record.region != filters.region:
        return False
    if filters.status and record.status != filters.status:
        return False
    if filters.min_total is not None and record.total_amount < filters.min_total:
        return False
    if filters.max_total is not None and record.total_amount > filters.max_total:
        return False
    return True


class SalesService:
    """Read-only queries over one record store."""

    def __init__(self, store: SalesStore, resource_uri: Optional[str] = None) -> None:
        self.store = store
        self.resource_uri = resource_uri or settings.resource_uri

    def locator(self, sale_id: str) -> str:
        """Stable per-record locator, accepted by :meth:`fetch`."""
        return f"{self.resource_uri}#{sale_id}"

    def resolve_locator(self, requested: str) -> str:
        """Strip the dataset locator prefix from ``requested`` if present."""
        prefix = f"{self.resource_uri}#"
        if requested.startswith(prefix):
            return requested[len(prefix):]
        return requested

    def list_sales(self, count: Optional[int] = None) -> ListResult:
        """Return the first ``count`` records (all of them by default).

        ``count`` is clamped into ``[0, len(store)]``; no records are ever
        fabricated beyond the generated dataset.
        """
        available = len(self.store)
        limit = available if count is None else max(0, min(count, available))
        logger.debug("list_sales count=%s -> %d of %d", count, limit, available)
        return ListResult(records=self.store.records[:limit], limit=limit, total_available=available)

    def search(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        limit: Optional[int] = None,
    ) -> SearchResult:
        """Return records matching ``query`` and ``filters`` in dataset order.

        At most ``limit`` records (default 20) are returned; the number of
        matches before truncation is reported as ``total_matches``.
        """
        if not query:
            raise ValueError("Search query must be a non-empty string")
        if limit is None:
            limit = DEFAULT_SEARCH_LIMIT
        if not 1 <= limit <= MAX_SEARCH_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_SEARCH_LIMIT}, got {limit}")

        needle = query.lower()
        matches = [
            record
            for record in self.store
            if matches_filters(record, filters) and needle in search_text(record)
        ]
        logger.debug("search %r matched %d record(s), limit %d", query, len(matches), limit)
        return SearchResult(matches=tuple(matches[:limit]), total_matches=len(matches))

    def fetch(self, sale_id: str, ids: Optional[Sequence[str]] = None) -> FetchResult:
        """Resolve ``sale_id`` and ``ids`` against the store.

        Duplicates are dropped keeping the first occurrence; a locator and
        the bare id of the same record count as duplicates.  Ids without a
        record are returned in ``missing`` exactly as they were requested.
        """
        if not sale_id:
            raise ValueError("id must be a non-empty string")
        extra = list(ids or [])
        if len(extra) > MAX_EXTRA_IDS:
            raise ValueError(f"At most {MAX_EXTRA_IDS} additional ids may be requested, got {len(extra)}")
        if any(not requested for requested in extra):
            raise ValueError("ids must not contain empty strings")

        seen = set()
        found: List[SaleRecord] = []
        missing: List[str] = []
        for requested in [sale_id, *extra]:
            key = self.resolve_locator(requested)
            if key in seen:
                continue
            seen.add(key)
            record = self.store.get(key)
            if record is None:
                missing.append(requested)
            else:
                found.append(record)
        logger.debug("fetch resolved %d record(s), %d missing", len(found), len(missing))
        return FetchResult(records=tuple(found), missing=tuple(missing))
