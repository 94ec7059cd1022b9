"""
Synthetic sales dataset generator.

``generate_sales`` draws every field of every record independently and
uniformly from its domain: customer, product, region and status from
their enumerations, quantity and unit price from fixed integer ranges,
and the sale date from the 120-day window ending at the generation
instant (to the second).  Ids are sequential: ``SALE-0001``,
``SALE-0002``...

Randomness is unseeded unless a ``random.Random`` instance is passed
in, so callers must not rely on concrete field values; only the ids,
the record count and ``totalAmount == quantity * unitPrice`` are
deterministic.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sales_demo_api.app.schemas.sale import CUSTOMERS, PRODUCTS, REGIONS, STATUSES, SaleRecord

logger = logging.getLogger(__name__)

SALE_DATE_WINDOW_DAYS = 120
QUANTITY_RANGE = (1, 25)
UNIT_PRICE_RANGE = (50, 750)


def format_sale_id(sequence: int) -> str:
    """Return the id of the ``sequence``-th record (1-based)."""
    return f"SALE-{sequence:04d}"


def generate_sales(
    count: int = 100,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> List[SaleRecord]:
    """Generate ``count`` synthetic sale records in id order.

    Parameters
    ----------
    count : int
        Number of records to produce.  Must not be negative.
    rng : Optional[random.Random]
        Source of randomness.  A fresh unseeded generator is used when
        omitted.
    now : Optional[datetime]
        Generation instant; the newest possible sale date.  Defaults to
        the current UTC time truncated to whole seconds.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if rng is None:
        rng = random.Random()
    if now is None:
        now = datetime.now(timezone.utc).replace(microsecond=0)

    window_seconds = SALE_DATE_WINDOW_DAYS * 24 * 60 * 60
    records: List[SaleRecord] = []
    for sequence in range(1, count + 1):
        quantity = rng.randint(*QUANTITY_RANGE)
        unit_price = rng.randint(*UNIT_PRICE_RANGE)
        records.append(
            SaleRecord(
                id=format_sale_id(sequence),
                customer_name=rng.choice(CUSTOMERS),
                product_name=rng.choice(PRODUCTS),
                region=rng.choice(REGIONS),
                quantity=quantity,
                unit_price=unit_price,
                total_amount=round(quantity * unit_price, 2),
                sale_date=now - timedelta(seconds=rng.randint(0, window_seconds)),
                status=rng.choice(STATUSES),
            )
        )
    logger.debug("Generated %d synthetic sale records", count)
    return records
