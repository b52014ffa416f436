from __future__ import annotations

import logging

import streamlit as st

from tenant_dashboard.customization.schema import TabConfig
from tenant_dashboard.ui.navigation import tab_title, visible_charts, visible_tabs
from tenant_dashboard.ui.pages.context import PageContext
from tenant_dashboard.ui.pages.helpers import hidden_count, render_chart_grid

logger = logging.getLogger(__name__)


def _render_placeholder(tab: TabConfig) -> None:
    st.info(f"{tab.label} is not available for this workspace yet.")


def _render_tab(tab: TabConfig, context: PageContext) -> None:
    if tab.description:
        st.caption(tab.description)
    # Registered components receive the config as their only input.
    if not context.bundle.components.render(tab.id, context.config):
        _render_placeholder(tab)


def render(context: PageContext) -> None:
    config = context.config
    tabs = visible_tabs(config)
    if not tabs:
        st.info("No sections are enabled for this workspace.")
    else:
        streamlit_tabs = st.tabs([tab_title(tab) for tab in tabs])
        for streamlit_tab, tab in zip(streamlit_tabs, tabs):
            with streamlit_tab:
                _render_tab(tab, context)

    charts = visible_charts(config.dashboard.charts, config)
    hidden = hidden_count(config.dashboard.charts, charts)
    if hidden:
        logger.debug("Dashboard: %d chart(s) hidden by feature flags", hidden)
    if charts:
        st.divider()
        st.subheader("Dashboard")
        render_chart_grid(charts)
