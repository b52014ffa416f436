from __future__ import annotations

import streamlit as st

from tenant_dashboard.ui.navigation import analytics_enabled, visible_charts
from tenant_dashboard.ui.pages.context import PageContext
from tenant_dashboard.ui.pages.helpers import render_chart_grid


def render(context: PageContext) -> None:
    config = context.config
    if not analytics_enabled(config):
        return
    charts = visible_charts(config.analytics.charts, config)
    if not charts:
        return
    st.divider()
    st.subheader("Analytics")
    render_chart_grid(charts)
