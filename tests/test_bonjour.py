"""
Bonjour Investments bundle: content properties, search behaviour and templates.
"""
import asyncio
from dataclasses import replace

import pytest

from tenant_dashboard.customization.checks import check_bundle
from tenant_dashboard.tenants.bonjour import customization
from tenant_dashboard.tenants.bonjour import search as search_module
from tenant_dashboard.tenants.bonjour.components import (
    SUPPLIERS,
    reference_list,
    search_summary,
    suppliers_frame,
)
from tenant_dashboard.tenants.bonjour.data import AMENITIES_KEY, PROPERTY_TYPES_KEY
from tenant_dashboard.tenants.bonjour.email_templates import build_supplier_email
from tenant_dashboard.tenants.bonjour.search import (
    MockPropertySearch,
    SearchFilters,
    SearchSession,
    run_search,
)
from tenant_dashboard.ui.components.formatting import format_availability, format_distance
from tenant_dashboard.ui.navigation import visible_charts, visible_tabs
from tenant_dashboard.ui.pages.clients import clients_frame


def _all_charts():
    config = customization.config
    return list(config.dashboard.charts.items()) + list(config.analytics.charts.items())


def test_bundle_has_no_issues():
    assert check_bundle(customization) == []


def test_tab_ids_unique_and_registered():
    tab_ids = [tab.id for tab in customization.config.dashboard.tabs]
    assert tab_ids == ["search", "emailTemplate", "supplierDatabase"]
    assert len(set(tab_ids)) == len(tab_ids)
    for tab_id in tab_ids:
        assert customization.components.lookup(tab_id) is not None


@pytest.mark.parametrize("chart_id,chart", _all_charts())
def test_every_series_has_a_color(chart_id, chart):
    assert len(chart.colors) >= len(chart.data_keys)


@pytest.mark.parametrize("chart_id,chart", _all_charts())
def test_data_keys_present_in_records(chart_id, chart):
    for record in chart.data:
        for key in chart.data_keys:
            assert key in record


def test_bookings_by_location_shares_sum_to_100():
    chart = customization.config.dashboard.charts["bookingsByLocation"]
    assert chart.data_keys == ("value",)
    assert len(chart.colors) == 3
    assert len(chart.data) == 3
    assert sum(record["value"] for record in chart.data) == 100


def test_booking_disabled_hides_booking_charts_only():
    config = replace(customization.config, features={**customization.config.features, "booking": False})
    assert [tab.id for tab in visible_tabs(config)] == ["search", "emailTemplate", "supplierDatabase"]
    assert [cid for cid, _ in visible_charts(config.dashboard.charts, config)] == ["supplierResponseTime"]
    assert [cid for cid, _ in visible_charts(config.analytics.charts, config)] == ["averageStayDuration"]


def test_reference_lists():
    assert customization.data.get_list(PROPERTY_TYPES_KEY) == ("Apartment", "House", "Studio")
    assert "Pet-friendly" in customization.data.get_list(AMENITIES_KEY)
    assert customization.data.get_list("unknownKey") == ()


def test_clients_in_display_order():
    frame = clients_frame(customization.config.clients)
    assert list(frame["Name"]) == ["Amazon", "InsuranceCo"]


def test_mock_search_returns_three_results_two_available():
    results = asyncio.run(MockPropertySearch(delay=0).search("SW1A 1AA"))
    assert len(results) == 3
    assert sum(1 for result in results if result.available) == 2
    assert results[0].name == "Maison Serviced Apartments"


def test_mock_search_waits_for_delay(monkeypatch):
    waited = []

    async def fake_sleep(seconds):
        waited.append(seconds)

    monkeypatch.setattr(search_module.asyncio, "sleep", fake_sleep)
    asyncio.run(MockPropertySearch().search("SW1A 1AA"))
    assert waited == [1.5]


def test_run_search_updates_session():
    session = SearchSession()
    assert run_search(MockPropertySearch(delay=0), session, "  SW1A 1AA ") is True
    assert session.query == "SW1A 1AA"
    assert not session.loading
    assert session.searched
    assert len(session.available_results()) == 2


def test_stale_results_are_discarded():
    session = SearchSession()
    first = session.begin("E1")
    second = session.begin("SW1A 1AA")
    assert session.loading

    assert session.resolve(first, ["stale"]) is False
    assert session.results == []
    assert session.resolve(second, list(search_module.MOCK_RESULTS)) is True
    assert len(session.results) == 3


def test_results_after_discard_are_dropped():
    session = SearchSession()

    class ClearingClient:
        async def search(self, query, filters):
            session.discard()
            return list(search_module.MOCK_RESULTS)

    assert run_search(ClearingClient(), session, "SW1A 1AA") is False
    assert session.results == []
    assert not session.loading


def test_empty_result_is_a_normal_state():
    session = SearchSession()
    assert run_search(MockPropertySearch(delay=0, results=()), session, "ZZ1 1ZZ") is True
    assert session.results == []
    assert session.searched


def test_supplier_email_template():
    email = build_supplier_email("Bonjour Investments")
    assert email.startswith("Dear [Supplier],")
    assert "within the next 2 hours" in email
    assert "7. High-quality images or video of the property" in email
    assert email.endswith("[Your Name]\nBonjour Investments")


def test_supplier_email_signed_by_user():
    email = build_supplier_email("Bonjour Investments", "Fan Zhang")
    assert email.endswith("Fan Zhang\nBonjour Investments")


def test_suppliers_frame():
    frame = suppliers_frame(SUPPLIERS)
    assert list(frame.columns) == ["Name", "Location", "Contact"]
    assert list(frame["Location"]) == ["London", "Manchester", "London"]


def test_result_labels():
    assert format_distance(0.5) == "0.5 miles"
    assert format_distance(1.0) == "1.0 mile"
    assert format_distance(None) == "–"
    assert format_availability(True) == "Available"
    assert format_availability(False) == "Not available"


def test_failing_client_leaves_session_ready_for_next_search(caplog):
    session = SearchSession()

    class FailingClient:
        async def search(self, query, filters):
            raise ConnectionError("supplier API unreachable")

    with caplog.at_level("ERROR"):
        assert run_search(FailingClient(), session, "SW1A 1AA") is False
    assert not session.loading
    assert session.results == []
    assert not session.searched
    assert "supplier API unreachable" in session.error
    assert "SW1A 1AA" in caplog.text

    assert run_search(MockPropertySearch(delay=0), session, "SW1A 1AA") is True
    assert session.error is None
    assert len(session.results) == 3


def test_stale_failure_is_ignored():
    session = SearchSession()
    first = session.begin("E1")
    second = session.begin("SW1A 1AA")
    assert session.fail(first, "boom") is False
    assert session.error is None
    assert session.pending_token == second


def test_filters_reach_the_client_and_summary():
    seen = []

    class RecordingClient:
        async def search(self, query, filters):
            seen.append((query, filters))
            return list(search_module.MOCK_RESULTS)

    session = SearchSession()
    filters = SearchFilters(property_types=("House",), amenities=("Parking",))
    assert run_search(RecordingClient(), session, "SW1A 1AA", filters) is True
    assert seen == [("SW1A 1AA", filters)]
    assert session.filters == filters
    assert search_summary(session.query, session.filters) == "Results near SW1A 1AA; type: House; with Parking"

    session.discard()
    assert session.filters == SearchFilters()


def test_reference_lists_come_from_the_bundle_data_bag():
    assert reference_list(PROPERTY_TYPES_KEY) == ["Apartment", "House", "Studio"]
    assert reference_list(AMENITIES_KEY) == list(customization.data.get_list(AMENITIES_KEY))
    assert reference_list("unknownKey") == []
