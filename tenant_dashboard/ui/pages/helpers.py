from __future__ import annotations

from typing import List, Mapping, Tuple

import streamlit as st

from tenant_dashboard.customization.schema import ChartConfig
from tenant_dashboard.ui.components.charts import render_chart


def render_chart_grid(charts: List[Tuple[str, ChartConfig]], columns: int = 2) -> None:
    """Render charts in config order, `columns` per row."""
    columns = max(columns, 1)
    for idx in range(0, len(charts), columns):
        row = charts[idx: idx + columns]
        cols = st.columns(len(row))
        for col, (chart_id, chart) in zip(cols, row):
            with col:
                render_chart(chart_id, chart)


def hidden_count(charts: Mapping[str, ChartConfig], shown: List[Tuple[str, ChartConfig]]) -> int:
    return len(charts) - len(shown)
