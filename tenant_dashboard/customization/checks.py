"""
Consistency checks for a constructed bundle.

Bundles are never validated while they are built. The host runs these checks
once after loading a tenant: issues are logged, and in strict mode any
error-level issue stops the app instead of leaving silent gaps in the UI.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Mapping

from tenant_dashboard.customization.bundle import CustomizationBundle
from tenant_dashboard.customization.errors import BundleValidationError
from tenant_dashboard.customization.schema import ChartConfig, ChartType

logger = logging.getLogger(__name__)

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass(frozen=True)
class BundleIssue:
    code: str
    location: str
    message: str
    severity: str = SEVERITY_ERROR


def _chart_issues(section: str, charts: Mapping[str, ChartConfig], features: Mapping[str, bool]) -> Iterable[BundleIssue]:
    for chart_id, chart in charts.items():
        location = f"{section}.charts.{chart_id}"
        if chart.type not in {member.value for member in ChartType}:
            yield BundleIssue("unknown-chart-type", location, f"unsupported chart type '{chart.type}'")
        if len(chart.colors) < len(chart.data_keys):
            yield BundleIssue(
                "missing-colors",
                location,
                f"{len(chart.colors)} color(s) for {len(chart.data_keys)} data key(s)",
            )
        for row, record in enumerate(chart.data):
            missing = [key for key in chart.data_keys if key not in record]
            if missing:
                yield BundleIssue(
                    "missing-data-key",
                    f"{location}.data[{row}]",
                    "missing " + ", ".join(missing),
                )
        if chart.feature is not None and chart.feature not in features:
            yield BundleIssue(
                "unknown-feature",
                location,
                f"gated on undeclared feature '{chart.feature}'",
                SEVERITY_WARNING,
            )


def check_bundle(bundle: CustomizationBundle) -> List[BundleIssue]:
    config = bundle.config
    issues: List[BundleIssue] = []

    tab_counts = Counter(tab.id for tab in config.dashboard.tabs)
    for tab_id, count in tab_counts.items():
        if count > 1:
            issues.append(
                BundleIssue("duplicate-tab-id", f"dashboard.tabs.{tab_id}", f"tab id used {count} times")
            )

    for tab in config.dashboard.tabs:
        if tab.id not in bundle.components:
            issues.append(
                BundleIssue(
                    "missing-component",
                    f"dashboard.tabs.{tab.id}",
                    "no registered component; the host shows a placeholder",
                    SEVERITY_WARNING,
                )
            )
        if tab.feature is not None and tab.feature not in config.features:
            issues.append(
                BundleIssue(
                    "unknown-feature",
                    f"dashboard.tabs.{tab.id}",
                    f"gated on undeclared feature '{tab.feature}'",
                    SEVERITY_WARNING,
                )
            )

    issues.extend(_chart_issues("dashboard", config.dashboard.charts, config.features))
    issues.extend(_chart_issues("analytics", config.analytics.charts, config.features))
    return issues


def ensure_valid(bundle: CustomizationBundle, strict: bool = False) -> List[BundleIssue]:
    """Log every issue; raise BundleValidationError on errors when strict."""
    issues = check_bundle(bundle)
    for issue in issues:
        logger.warning("Bundle %s at %s: %s", issue.code, issue.location, issue.message)
    errors = [issue for issue in issues if issue.severity == SEVERITY_ERROR]
    if strict and errors:
        raise BundleValidationError(errors)
    return issues
