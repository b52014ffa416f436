"""
Plotly figures built from tenant chart configs, with consistent styling.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from tenant_dashboard.customization.schema import ChartConfig, ChartType

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "plotly_white"

# Internal long-format column names, kept apart from tenant record fields.
SERIES_COL = "__series__"
VALUE_COL = "__value__"
POSITION_COL = "__position__"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        legend_title=legend_title,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    return fig


def _configure_axes(fig: go.Figure) -> go.Figure:
    fig.update_layout(hovermode="x unified")
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def humanize_key(key: str) -> str:
    """`avgResponseTime` -> `Avg Response Time`."""
    words: List[str] = []
    current = ""
    for char in key:
        if char.isupper() and current:
            words.append(current)
            current = char
        elif char in "_-":
            if current:
                words.append(current)
            current = ""
        else:
            current += char
    if current:
        words.append(current)
    return " ".join(word[:1].upper() + word[1:] for word in words)


def chart_frame(chart: ChartConfig) -> pd.DataFrame:
    return pd.DataFrame([dict(record) for record in chart.data])


def plottable_keys(chart_id: str, chart: ChartConfig, df: pd.DataFrame) -> List[str]:
    """Series keys with data behind them; records missing a key show as gaps."""
    keys = [key for key in chart.data_keys if key in df.columns]
    dropped = [key for key in chart.data_keys if key not in keys]
    if dropped:
        logger.warning("Chart '%s': no data for key(s) %s", chart_id, ", ".join(dropped))
    return keys


def chart_from_config(chart_id: str, chart: ChartConfig) -> Optional[go.Figure]:
    """Build a figure for `chart`, or None when nothing can be plotted."""
    try:
        chart_type = ChartType(chart.type)
    except ValueError:
        logger.warning("Chart '%s': unsupported type '%s'", chart_id, chart.type)
        return None

    df = chart_frame(chart)
    if df.empty:
        return None
    keys = plottable_keys(chart_id, chart, df)
    if not keys:
        return None

    category = chart.category_key()
    title = chart.title or humanize_key(chart_id)
    colors = list(chart.colors) or None

    if chart_type is ChartType.PIE:
        fig = px.pie(
            df,
            names=category,
            values=keys[0],
            color_discrete_sequence=colors,
        )
        fig.update_traces(textinfo="percent+label")
        return _configure_layout(fig, title)

    if category is None:
        df = df.copy()
        df.insert(0, POSITION_COL, range(1, len(df) + 1))
        category = POSITION_COL

    labels = {key: humanize_key(key) for key in keys}
    category_label = "Position" if category == POSITION_COL else humanize_key(category)
    color_map = {
        labels[key]: chart.color_for(index)
        for index, key in enumerate(keys)
        if chart.color_for(index) is not None
    }
    long_df = df.melt(id_vars=[category], value_vars=keys, var_name=SERIES_COL, value_name=VALUE_COL)
    long_df[SERIES_COL] = long_df[SERIES_COL].map(labels)

    common = dict(
        x=category,
        y=VALUE_COL,
        color=SERIES_COL,
        color_discrete_map=color_map,
        labels={category: category_label, VALUE_COL: "", SERIES_COL: ""},
    )
    if chart_type is ChartType.BAR:
        fig = px.bar(long_df, barmode="group", **common)
    elif chart_type is ChartType.LINE:
        fig = px.line(long_df, markers=True, **common)
    else:
        fig = px.area(long_df, **common)

    yaxis_title = labels[keys[0]] if len(keys) == 1 else None
    fig = _configure_layout(fig, title, yaxis_title, legend_title="")
    fig.update_layout(showlegend=len(keys) > 1)
    return _configure_axes(fig)


def render_chart(chart_id: str, chart: ChartConfig) -> None:
    fig = chart_from_config(chart_id, chart)
    if fig is None:
        st.info(f"{chart.title or humanize_key(chart_id)}: no data to display.")
        return
    render_plotly(fig)
