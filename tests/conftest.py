"""Shared fixtures: a small hand-written dataset and a client serving it."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient

from sales_demo_api.app.core.store import SalesStore, get_sales_store
from sales_demo_api.app.main import create_app
from sales_demo_api.app.schemas.sale import SaleRecord
from sales_demo_api.app.services.sales_service import SalesService

GENERATED_AT = datetime(2025, 9, 1, 12, 0, 0, tzinfo=timezone.utc)

# customer, product, region, status, quantity, unit price
SAMPLE_ROWS = [
    ("Acme Corp", "MCP Gateway", "Norte", "Completed", 3, 200),
    ("Globex", "MCP Mobile", "Sur", "Pending", 1, 50),
    ("Acme Corp", "MCP Pro License", "Norte", "Pending", 10, 300),
    ("Initech", "MCP Monitoring", "Este", "Cancelled", 5, 120),
    ("Acme Corp", "MCP Starter Pack", "Centro", "Completed", 25, 750),
    ("Stark Industries", "MCP Analytics Suite", "Norte", "Completed", 4, 500),
    ("Umbrella", "MCP Security Add-on", "Oeste", "Completed", 7, 90),
    ("Acme Corp", "MCP Integrations Bundle", "Norte", "Completed", 2, 410),
]


def make_record(
    sequence: int,
    customer: str,
    product: str,
    region: str,
    status: str,
    quantity: int,
    unit_price: int,
) -> SaleRecord:
    return SaleRecord(
        id=f"SALE-{sequence:04d}",
        customer_name=customer,
        product_name=product,
        region=region,
        quantity=quantity,
        unit_price=unit_price,
        total_amount=round(quantity * unit_price, 2),
        sale_date=GENERATED_AT - timedelta(days=sequence, hours=sequence),
        status=status,
    )


@pytest.fixture()
def sample_records() -> List[SaleRecord]:
    return [make_record(index, *row) for index, row in enumerate(SAMPLE_ROWS, start=1)]


@pytest.fixture()
def store(sample_records: List[SaleRecord]) -> SalesStore:
    return SalesStore(sample_records, generated_at=GENERATED_AT)


@pytest.fixture()
def service(store: SalesStore) -> SalesService:
    return SalesService(store)


@pytest.fixture()
def app(store: SalesStore):
    application = create_app()
    application.dependency_overrides[get_sales_store] = lambda: store
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
