"""
Feature-gated navigation: which tabs and charts the host shows.
"""

from __future__ import annotations

from typing import List, Mapping, Tuple

from tenant_dashboard.customization.schema import AppConfig, ChartConfig, TabConfig

# Flags that switch whole host sections on and off.
REPORTING_FEATURE = "reporting"


def visible_tabs(config: AppConfig) -> List[TabConfig]:
    return [tab for tab in config.dashboard.tabs if config.is_enabled(tab.feature)]


def visible_charts(charts: Mapping[str, ChartConfig], config: AppConfig) -> List[Tuple[str, ChartConfig]]:
    return [(chart_id, chart) for chart_id, chart in charts.items() if config.is_enabled(chart.feature)]


def tab_title(tab: TabConfig) -> str:
    return f"{tab.icon} {tab.label}" if tab.icon else tab.label


def analytics_enabled(config: AppConfig) -> bool:
    return config.is_enabled(REPORTING_FEATURE)


def enabled_features(config: AppConfig) -> List[str]:
    return [name for name, enabled in config.features.items() if enabled]
