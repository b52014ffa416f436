"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st


def render_table(
    df: pd.DataFrame,
    column_labels: Optional[Dict[str, str]] = None,
    height: Optional[int] = None,
    export_file_name: Optional[str] = "export.csv",
    key: Optional[str] = None,
) -> None:
    if df.empty:
        st.info("No data to display.")
        return

    display_df = df.rename(columns=column_labels) if column_labels else df
    if height is None:
        st.dataframe(display_df, use_container_width=True, hide_index=True)
    else:
        st.dataframe(display_df, use_container_width=True, height=height, hide_index=True)

    if export_file_name:
        csv_bytes = df.to_csv(index=False).encode("utf-8")
        st.download_button(
            "Download CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
            key=key,
        )
