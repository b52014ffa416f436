"""
Bonjour Investments components, registered against the tab ids in `config`.

Every renderer takes the current AppConfig as its only argument and keeps its
interactive state in its own `ComponentState` namespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd
import streamlit as st

from tenant_dashboard.config import load_settings
from tenant_dashboard.customization.loader import load_bundle
from tenant_dashboard.customization.schema import AppConfig
from tenant_dashboard.customization.state import ComponentState
from tenant_dashboard.tenants.bonjour.data import AMENITIES_KEY, PROPERTY_TYPES_KEY
from tenant_dashboard.tenants.bonjour.email_templates import build_supplier_email
from tenant_dashboard.tenants.bonjour.search import (
    MockPropertySearch,
    SearchFilters,
    SearchResult,
    SearchSession,
    run_search,
)
from tenant_dashboard.ui.components.formatting import format_availability, format_distance
from tenant_dashboard.ui.components.tables import render_table

AVAILABLE_COLOR = "#22C55E"
UNAVAILABLE_COLOR = "#EF4444"
ALL_LOCATIONS = "All locations"
TENANT = "bonjour"


@dataclass(frozen=True)
class Supplier:
    id: int
    name: str
    location: str
    contact: str


SUPPLIERS: List[Supplier] = [
    Supplier(1, "Maison Serviced Apartments", "London", "info@maison.com"),
    Supplier(2, "Crystal Property Shortlets", "Manchester", "bookings@crystal.com"),
    Supplier(3, "London Aspect Apartments", "London", "reservations@londonaspect.com"),
]


def _render_result(result: SearchResult) -> None:
    color = AVAILABLE_COLOR if result.available else UNAVAILABLE_COLOR
    st.markdown(f"**{result.name}**")
    st.caption(f"Distance: {format_distance(result.distance_miles)}")
    st.markdown(
        f"<span style='color:{color};font-size:0.9em'>{format_availability(result.available)}</span>",
        unsafe_allow_html=True,
    )


def reference_list(key: str) -> List[str]:
    """Tenant reference list from the bundle data bag; empty when absent."""
    return list(load_bundle(TENANT).data.get_list(key))


def search_summary(query: str, filters: SearchFilters) -> str:
    parts = [f"near {query}" if query else "for any location"]
    if filters.property_types:
        parts.append("type: " + ", ".join(filters.property_types))
    if filters.amenities:
        parts.append("with " + ", ".join(filters.amenities))
    return "Results " + "; ".join(parts)


def search_component(config: AppConfig) -> None:
    state = ComponentState("bonjour_search")
    session: SearchSession = state.setdefault("session", SearchSession())

    st.subheader("Property Search")
    input_col, button_col = st.columns([4, 1])
    with input_col:
        postcode = st.text_input(
            "Postcode",
            placeholder="Enter postcode",
            key=state.key("postcode"),
            label_visibility="collapsed",
        )
    with button_col:
        clicked = st.button(
            "Search",
            type="primary",
            key=state.key("submit"),
            use_container_width=True,
        )

    filter_cols = st.columns(2)
    with filter_cols[0]:
        property_types = st.multiselect(
            "Property type",
            options=reference_list(PROPERTY_TYPES_KEY),
            key=state.key("property_types"),
        )
    with filter_cols[1]:
        amenities = st.multiselect(
            "Amenities",
            options=reference_list(AMENITIES_KEY),
            key=state.key("amenities"),
        )

    if clicked:
        client = MockPropertySearch(delay=load_settings().search_delay)
        with st.spinner("Searching..."):
            run_search(client, session, postcode, SearchFilters(tuple(property_types), tuple(amenities)))

    if session.error:
        st.warning(session.error)
    elif session.results:
        st.caption(search_summary(session.query, session.filters))
        for result in session.results:
            _render_result(result)
            st.divider()
        if st.button("Clear results", key=state.key("clear")):
            session.discard()
            st.rerun()
    elif session.searched:
        st.info("No properties found for this search.")


def email_template_component(config: AppConfig) -> None:
    state = ComponentState("bonjour_email")

    st.subheader("Email Template Generator")
    if st.button("Generate Template", type="primary", key=state.key("generate")):
        state.set("template", build_supplier_email(config.company_name, config.user_name))

    template = state.get("template", "")
    if template:
        st.text_area(
            "Supplier email",
            value=template,
            height=420,
            disabled=True,
        )
        st.download_button(
            "Download as text",
            data=template.encode("utf-8"),
            file_name="supplier_request.txt",
            mime="text/plain",
            key=state.key("download"),
        )


def suppliers_frame(suppliers: Iterable[Supplier]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Name": supplier.name, "Location": supplier.location, "Contact": supplier.contact}
            for supplier in suppliers
        ],
        columns=["Name", "Location", "Contact"],
    )


def supplier_database_component(config: AppConfig) -> None:
    state = ComponentState("bonjour_suppliers")

    st.subheader("Supplier Database")
    locations = sorted({supplier.location for supplier in SUPPLIERS})
    location = st.selectbox(
        "Location",
        options=[ALL_LOCATIONS] + locations,
        key=state.key("location"),
    )
    suppliers = [s for s in SUPPLIERS if location == ALL_LOCATIONS or s.location == location]
    render_table(
        suppliers_frame(suppliers),
        export_file_name="suppliers.csv",
        key=state.key("export"),
    )
