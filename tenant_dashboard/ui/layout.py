"""
Layout helpers for the Streamlit application (page setup, branding, sidebar).
"""

from __future__ import annotations

import os
from typing import Optional

import streamlit as st

from tenant_dashboard.customization.schema import AppConfig, ClientConfig
from tenant_dashboard.ui.navigation import enabled_features

CLIENT_SELECT_KEY = "host__selected_client"


def setup_page(config: AppConfig) -> None:
    """Set Streamlit page configuration and tenant branding."""
    st.set_page_config(
        page_title=config.title,
        layout="wide",
        page_icon=":bar_chart:",
    )
    _inject_brand_colors(config.primary_color, config.secondary_color)


def _inject_brand_colors(primary: str, secondary: str) -> None:
    """Apply the tenant colours to primary buttons and the active tab marker."""
    st.markdown(
        f"""
        <style>
        button[kind="primary"],
        button[data-testid="baseButton-primary"] {{
            background-color: {primary} !important;
            border-color: {primary} !important;
            color: #ffffff !important;
        }}
        button[kind="primary"]:hover,
        button[data-testid="baseButton-primary"]:hover {{
            background-color: {secondary} !important;
            border-color: {secondary} !important;
        }}
        div[data-baseweb="tab-highlight"] {{
            background-color: {primary} !important;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def logo_source(logo: Optional[str]) -> Optional[str]:
    """Return the logo reference if Streamlit can load it, else None."""
    if not logo:
        return None
    if logo.startswith(("http://", "https://")):
        return logo
    return logo if os.path.exists(logo) else None


def render_header(config: AppConfig) -> None:
    st.title(config.title)
    if config.user_name:
        st.caption(f"Signed in as {config.user_name}")


def render_sidebar(config: AppConfig) -> Optional[ClientConfig]:
    """Draw branding, client selector and feature list; return the chosen client."""
    logo = logo_source(config.logo)
    if logo:
        st.sidebar.image(logo, use_container_width=True)
    st.sidebar.header(config.company_name)
    if config.user_name:
        st.sidebar.caption(config.user_name)

    selected: Optional[ClientConfig] = None
    if config.clients:
        selected = st.sidebar.selectbox(
            "Client",
            options=list(config.clients),
            format_func=lambda client: f"{client.name} ({client.industry})" if client.industry else client.name,
            key=CLIENT_SELECT_KEY,
        )

    features = enabled_features(config)
    with st.sidebar.expander("Enabled features", expanded=False):
        if features:
            for name in features:
                st.markdown(f"- {name}")
        else:
            st.caption("No optional features enabled.")
    return selected
