"""
Pydantic models for synthetic sale records and the sales operations.

``SaleRecord`` is the only entity exposed by the API.  The request
models (``SearchRequest``, ``FetchRequest``) carry all boundary
validation: enumerations, ranges and list sizes are checked here so
the service layer receives well-formed input only.  The response
models describe the envelopes built by
``services.response_builder``.

Attribute names are snake_case in Python; the JSON representation uses
camelCase (``customerName``, ``totalAmount``...).  Both spellings are
accepted on input.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

CUSTOMERS = (
    "Acme Corp",
    "Globex",
    "Initech",
    "Soylent",
    "Umbrella",
    "Stark Industries",
    "Wayne Enterprises",
    "Wonka Industries",
    "Oscorp",
    "Tyrell Corp",
)

PRODUCTS = (
    "MCP Gateway",
    "MCP Analytics Suite",
    "MCP Pro License",
    "MCP Starter Pack",
    "MCP Monitoring",
    "MCP Security Add-on",
    "MCP Mobile",
    "MCP Integrations Bundle",
)

REGIONS = ("Norte", "Sur", "Este", "Oeste", "Centro")
STATUSES = ("Completed", "Pending", "Cancelled")

Region = Literal["Norte", "Sur", "Este", "Oeste", "Centro"]
SaleStatus = Literal["Completed", "Pending", "Cancelled"]

MAX_SEARCH_LIMIT = 100
MAX_EXTRA_IDS = 50

NonEmptyStr = Annotated[str, Field(min_length=1)]
ExtraIds = Annotated[List[NonEmptyStr], Field(min_length=1, max_length=MAX_EXTRA_IDS)]


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SaleRecord(CamelModel):
    """One synthetic sale.  Instances are immutable."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., pattern=r"^SALE-\d{4,}$", examples=["SALE-0001"])
    customer_name: str = Field(..., examples=["Acme Corp"])
    product_name: str = Field(..., examples=["MCP Gateway"])
    region: Region
    quantity: int = Field(..., ge=1, le=25)
    unit_price: int = Field(..., ge=50, le=750)
    total_amount: float = Field(..., examples=[1250.0])
    sale_date: datetime = Field(..., examples=["2025-09-01T10:00:00Z"])
    status: SaleStatus

    @model_validator(mode="after")
    def check_total_amount(self) -> "SaleRecord":
        expected = round(self.quantity * self.unit_price, 2)
        if self.total_amount != expected:
            raise ValueError(
                f"totalAmount {self.total_amount} does not equal quantity * unitPrice ({expected})"
            )
        return self


class SearchFilters(CamelModel):
    """Structured constraints for ``search``.  Every field is optional."""

    customer: Optional[str] = Field(None, description="Exact customer name")
    product: Optional[str] = Field(None, description="Exact product name")
    region: Optional[Region] = Field(None, description="Exact region")
    status: Optional[SaleStatus] = Field(None, description="Exact sale status")
    min_total: Optional[float] = Field(None, allow_inf_nan=False, description="Minimum total amount of the sale")
    max_total: Optional[float] = Field(None, allow_inf_nan=False, description="Maximum total amount of the sale")


class SearchRequest(CamelModel):
    query: str = Field(
        ...,
        min_length=1,
        description="Free text matched against customer, product, region and status",
    )
    filters: Optional[SearchFilters] = None
    limit: Optional[int] = Field(
        None,
        ge=1,
        le=MAX_SEARCH_LIMIT,
        description="Maximum number of results to return (default 20)",
    )


class FetchRequest(CamelModel):
    id: str = Field(..., min_length=1, description="Primary ID (or locator) returned by search")
    ids: Optional[ExtraIds] = Field(None, description="Additional IDs returned by search")


class ListSalesResponse(CamelModel):
    generated_at: datetime
    total: int
    records: List[SaleRecord]
    note: str
    limit: int
    total_available: int
    source: str = "list-sales"
    summary: str


class DatasetResponse(CamelModel):
    """The whole dataset, as served by the dataset resource."""

    generated_at: datetime
    total: int
    records: List[SaleRecord]
    note: str
    total_available: int
    uri: str
    mime_type: str = "application/json"


class SearchHit(CamelModel):
    id: str
    title: str
    snippet: str
    uri: str
    score: int = 1


class SearchQueryEcho(CamelModel):
    query: str
    filters: Optional[Dict[str, Any]] = None
    limit: Optional[int] = None


class SearchResponse(CamelModel):
    results: List[SearchHit]
    total_matches: int
    returned: int
    note: str
    query: SearchQueryEcho
    summary: str


class FetchResponse(CamelModel):
    records: List[SaleRecord]
    missing: Optional[List[str]] = None
    note: str
    summary: str
