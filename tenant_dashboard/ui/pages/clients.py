from __future__ import annotations

from typing import Iterable

import pandas as pd
import streamlit as st

from tenant_dashboard.customization.schema import ClientConfig
from tenant_dashboard.ui.components.tables import render_table
from tenant_dashboard.ui.pages.context import PageContext


def clients_frame(clients: Iterable[ClientConfig]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Name": client.name, "Industry": client.industry} for client in clients],
        columns=["Name", "Industry"],
    )


def render(context: PageContext) -> None:
    clients = context.config.clients
    if not clients:
        return
    with st.expander("Clients", expanded=False):
        if context.selected_client is not None:
            st.caption(f"Working on behalf of {context.selected_client.name}")
        render_table(clients_frame(clients), export_file_name=None)
