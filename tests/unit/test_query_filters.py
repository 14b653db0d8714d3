"""Unit tests for listing predicates."""

import pytest

from app.models.user import Role
from app.policies import Identity, ServiceFilter, build_owner_filter, build_service_filter
from app.policies.query_filters import parse_price_bound
from app.routers.services import total_pages

CLIENT = Identity(id="1" * 24, role=Role.CLIENT)
VENDOR = Identity(id="2" * 24, role=Role.VENDOR)
ADMIN = Identity(id="3" * 24, role=Role.ADMIN)


def render(service_filter: ServiceFilter) -> list[str]:
    return [
        str(clause.compile(compile_kwargs={"literal_binds": True}))
        for clause in service_filter.clauses()
    ]


class TestBuildServiceFilter:
    """Role-dependent predicate construction."""

    def test_client_is_forced_to_active(self):
        service_filter = build_service_filter(CLIENT, {"status": "inactive"})
        assert service_filter.status == "active"

    def test_client_without_status_still_sees_active_only(self):
        assert build_service_filter(CLIENT, {}).status == "active"

    @pytest.mark.parametrize("identity", [VENDOR, ADMIN])
    def test_status_honored_for_vendor_and_admin(self, identity: Identity):
        assert build_service_filter(identity, {"status": "inactive"}).status == "inactive"

    @pytest.mark.parametrize("identity", [VENDOR, ADMIN])
    def test_no_status_means_any_status(self, identity: Identity):
        assert build_service_filter(identity, {}).status is None

    def test_category_and_price_bounds(self):
        service_filter = build_service_filter(
            VENDOR, {"category": "Spa", "minPrice": "20", "maxPrice": "80.5"}
        )
        assert service_filter == ServiceFilter(category="Spa", min_price=20.0, max_price=80.5)

    def test_empty_values_are_ignored(self):
        service_filter = build_service_filter(ADMIN, {"status": "", "category": "", "minPrice": ""})
        assert service_filter == ServiceFilter()

    def test_unparsable_price_is_ignored(self):
        service_filter = build_service_filter(CLIENT, {"minPrice": "cheap", "maxPrice": "100"})
        assert service_filter.min_price is None
        assert service_filter.max_price == 100.0

    def test_listing_is_never_owner_scoped(self):
        assert build_service_filter(VENDOR, {}).vendor_id is None

    def test_owner_filter_scopes_to_caller_with_any_status(self):
        service_filter = build_owner_filter(VENDOR)
        assert service_filter.vendor_id == VENDOR.id
        assert service_filter.status is None


class TestParsePriceBound:
    """Lenient price parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("10", 10.0), (" 12.5 ", 12.5), ("0", 0.0), (None, None), ("abc", None), ("", None)],
    )
    def test_parse(self, raw, expected):
        assert parse_price_bound(raw) == expected

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
    def test_non_finite_is_ignored(self, raw):
        assert parse_price_bound(raw) is None


class TestServiceFilterClauses:
    """SQL rendering of the predicate."""

    def test_empty_filter_has_no_clauses(self):
        assert ServiceFilter().clauses() == []

    def test_price_bounds_are_inclusive(self):
        rendered = render(ServiceFilter(min_price=20.0, max_price=50.0))
        assert rendered == ["services.price >= 20.0", "services.price <= 50.0"]

    def test_status_and_category(self):
        rendered = render(build_service_filter(CLIENT, {"category": "Hair"}))
        assert rendered == ["services.status = 'active'", "services.category = 'Hair'"]

    def test_owner_scope_has_no_status_clause(self):
        rendered = render(build_owner_filter(VENDOR))
        assert rendered == [f"services.vendor_id = '{VENDOR.id}'"]


@pytest.mark.parametrize("total,limit,expected", [(0, 20, 0), (3, 2, 2), (4, 2, 2), (21, 20, 2)])
def test_total_pages(total, limit, expected):
    assert total_pages(total, limit) == expected
