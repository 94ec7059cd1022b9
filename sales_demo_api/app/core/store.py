"""
In-memory record store and its FastAPI dependency.

``SalesStore`` replaces a database for this demo: it holds one
generated dataset in order and indexes it by record id.  A store is
read-only once constructed, so any number of concurrent requests may
query the same instance without locking.

``build_store`` creates a store from the application settings and
``get_sales_store`` hands a store to route handlers.  By default the
application builds a single store when it is created and keeps it on
``app.state``; with ``DATASET_PER_REQUEST`` enabled every request gets
its own freshly generated dataset instead.  Tests override
``get_sales_store`` to inject a store built from hand-written records.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Tuple

from fastapi import Request

from .config import Settings, settings
from .data_generator import generate_sales
from sales_demo_api.app.schemas.sale import SaleRecord

logger = logging.getLogger(__name__)


class SalesStore:
    """Immutable, id-indexed collection of sale records."""

    def __init__(self, records: Iterable[SaleRecord], generated_at: Optional[datetime] = None) -> None:
        self._records: Tuple[SaleRecord, ...] = tuple(records)
        index = {}
        for record in self._records:
            if record.id in index:
                raise ValueError(f"Duplicate sale id {record.id!r}")
            index[record.id] = record
        self._by_id = MappingProxyType(index)
        self._generated_at = generated_at or datetime.now(timezone.utc)

    @property
    def records(self) -> Tuple[SaleRecord, ...]:
        """All records in generation order."""
        return self._records

    @property
    def generated_at(self) -> datetime:
        return self._generated_at

    def get(self, sale_id: str) -> Optional[SaleRecord]:
        """Return the record with ``sale_id`` or ``None``."""
        return self._by_id.get(sale_id)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SaleRecord]:
        return iter(self._records)

    def __contains__(self, sale_id: object) -> bool:
        return sale_id in self._by_id

    def __repr__(self) -> str:
        return f"SalesStore(records={len(self._records)}, generated_at={self._generated_at.isoformat()})"


def build_store(config: Settings = settings) -> SalesStore:
    """Generate a dataset according to ``config`` and index it."""
    rng = random.Random(config.dataset_seed) if config.dataset_seed is not None else None
    now = datetime.now(timezone.utc).replace(microsecond=0)
    store = SalesStore(generate_sales(config.dataset_size, rng=rng, now=now), generated_at=now)
    logger.info("Built sales store with %d synthetic records", len(store))
    return store


def get_sales_store(request: Request) -> SalesStore:
    """FastAPI dependency returning the store serving this request."""
    if settings.dataset_per_request:
        return build_store(settings)
    return request.app.state.sales_store
