"""Tests for the list, search and fetch operations of ``SalesService``."""

import pytest

from sales_demo_api.app.core.data_generator import generate_sales
from sales_demo_api.app.core.store import SalesStore
from sales_demo_api.app.schemas.sale import SearchFilters
from sales_demo_api.app.services.sales_service import SalesService, matches_filters, search_text


def ids(records):
    return [r.id for r in records]


class TestListSales:
    def test_defaults_to_whole_dataset(self, service, sample_records):
        result = service.list_sales()
        assert list(result.records) == sample_records
        assert result.limit == len(sample_records)
        assert result.total_available == len(sample_records)

    def test_returns_prefix_in_generation_order(self, service):
        result = service.list_sales(3)
        assert ids(result.records) == ["SALE-0001", "SALE-0002", "SALE-0003"]
        assert result.limit == 3

    @pytest.mark.parametrize("count, expected", [(1000, 8), (8, 8), (0, 0), (-5, 0)])
    def test_clamps_count(self, service, count, expected):
        result = service.list_sales(count)
        assert len(result.records) == expected
        assert result.limit == expected
        assert result.total_available == 8


class TestSearch:
    def test_text_and_filters_are_conjunctive(self, service):
        result = service.search("acme", SearchFilters(region="Norte", status="Completed"))
        assert ids(result.matches) == ["SALE-0001", "SALE-0008"]
        assert result.total_matches == 2

    def test_text_match_is_case_insensitive(self, service):
        assert ids(service.search("ACME").matches) == ["SALE-0001", "SALE-0003", "SALE-0005", "SALE-0008"]

    def test_text_matches_space_joined_projection(self, service, sample_records):
        assert search_text(sample_records[0]) == "acme corp mcp gateway norte completed"
        assert ids(service.search("gateway norte").matches) == ["SALE-0001"]
        assert service.search("norte gateway").total_matches == 0

    def test_total_range_is_inclusive(self, service):
        result = service.search("mcp", SearchFilters(min_total=600, max_total=820))
        assert ids(result.matches) == ["SALE-0001", "SALE-0004", "SALE-0007", "SALE-0008"]

    def test_customer_and_product_filters_are_exact(self, service):
        assert service.search("mcp", SearchFilters(customer="Acme")).total_matches == 0
        result = service.search("mcp", SearchFilters(customer="Acme Corp", product="MCP Gateway"))
        assert ids(result.matches) == ["SALE-0001"]

    def test_empty_filters_equal_no_filters(self, service):
        assert service.search("acme", SearchFilters()) == service.search("acme")

    def test_limit_truncates_but_reports_total(self, service):
        result = service.search("mcp", limit=3)
        assert ids(result.matches) == ["SALE-0001", "SALE-0002", "SALE-0003"]
        assert result.total_matches == 8

    def test_default_limit_is_twenty(self):
        service = SalesService(SalesStore(generate_sales(60)))
        result = service.search("mcp")
        assert len(result.matches) == 20
        assert result.total_matches == 60

    def test_no_matches_is_an_empty_result(self, service):
        result = service.search("does-not-exist")
        assert result.matches == ()
        assert result.total_matches == 0

    @pytest.mark.parametrize("query, limit", [("", None), ("acme", 0), ("acme", 101)])
    def test_malformed_input_is_rejected(self, service, query, limit):
        with pytest.raises(ValueError):
            service.search(query, limit=limit)

    def test_results_never_exceed_limit(self):
        service = SalesService(SalesStore(generate_sales(100)))
        for limit in (1, 7, 50, 100):
            result = service.search("mcp", limit=limit)
            assert len(result.matches) <= limit
            assert result.total_matches >= len(result.matches)


class TestMatchesFilters:
    def test_none_matches_everything(self, sample_records):
        assert all(matches_filters(record, None) for record in sample_records)

    def test_empty_strings_are_ignored(self, sample_records):
        assert matches_filters(sample_records[1], SearchFilters(customer="", product=""))


class TestFetch:
    def test_partial_success_on_generated_dataset(self):
        store = SalesStore(generate_sales(100))
        result = SalesService(store).fetch("SALE-0001", ["SALE-9999"])
        assert result.records == (store.get("SALE-0001"),)
        assert result.missing == ("SALE-9999",)

    def test_deduplicates_requested_ids(self, service):
        result = service.fetch("SALE-0001", ["SALE-0001"])
        assert ids(result.records) == ["SALE-0001"]
        assert result.missing == ()

    def test_preserves_first_occurrence_order(self, service):
        result = service.fetch("SALE-0003", ["SALE-0001", "NOPE", "SALE-0003", "SALE-0002", "NOPE"])
        assert ids(result.records) == ["SALE-0003", "SALE-0001", "SALE-0002"]
        assert result.missing == ("NOPE",)

    def test_all_missing_still_succeeds(self, service):
        result = service.fetch("SALE-0404", ["SALE-0500"])
        assert result.records == ()
        assert result.missing == ("SALE-0404", "SALE-0500")

    def test_accepts_search_locators(self, service):
        locator = service.locator("SALE-0002")
        result = service.fetch(locator, ["SALE-0002", service.locator("SALE-0777")])
        assert ids(result.records) == ["SALE-0002"]
        assert result.missing == (service.locator("SALE-0777"),)

    @pytest.mark.parametrize(
        "sale_id, extra",
        [("", None), ("SALE-0001", [""]), ("SALE-0001", [f"SALE-{n:04d}" for n in range(51)])],
    )
    def test_malformed_input_is_rejected(self, service, sale_id, extra):
        with pytest.raises(ValueError):
            service.fetch(sale_id, extra)


def test_operations_are_idempotent(service):
    filters = SearchFilters(region="Norte")
    assert service.list_sales(4) == service.list_sales(4)
    assert service.search("mcp", filters, 2) == service.search("mcp", filters, 2)
    assert service.fetch("SALE-0002", ["SALE-0042"]) == service.fetch("SALE-0002", ["SALE-0042"])
