import logging

import streamlit as st

from tenant_dashboard.bootstrap_env import ensure_env

ensure_env()  # must run before settings are read

from tenant_dashboard.config import LOG_FORMAT, load_settings
from tenant_dashboard.customization.checks import ensure_valid
from tenant_dashboard.customization.errors import CustomizationError
from tenant_dashboard.customization.loader import load_bundle
from tenant_dashboard.ui.layout import render_header, render_sidebar, setup_page
from tenant_dashboard.ui.pages import analytics, clients, dashboard
from tenant_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

# Rendered in order below the header.
PAGE_RENDERERS = [
    dashboard.render,
    analytics.render,
    clients.render,
]


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    try:
        bundle = load_bundle(settings.tenant)
        issues = ensure_valid(bundle, strict=settings.strict_checks)
    except CustomizationError as exc:
        logger.error("Cannot start dashboard: %s", exc)
        st.set_page_config(page_title="Dashboard", layout="wide")
        st.error(str(exc))
        st.stop()
        return

    setup_page(bundle.config)
    render_header(bundle.config)
    if issues:
        with st.expander(f"Configuration notes ({len(issues)})", expanded=False):
            for issue in issues:
                st.caption(f"{issue.location}: {issue.message}")

    selected_client = render_sidebar(bundle.config)
    context = PageContext(bundle=bundle, selected_client=selected_client)
    for renderer in PAGE_RENDERERS:
        renderer(context)


if __name__ == "__main__":
    main()
