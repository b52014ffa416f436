from dataclasses import replace

import pytest

from tenant_dashboard.customization.bundle import CustomizationBundle
from tenant_dashboard.customization.checks import (
    SEVERITY_WARNING,
    check_bundle,
    ensure_valid,
)
from tenant_dashboard.customization.errors import BundleValidationError
from tenant_dashboard.customization.schema import ChartConfig, DashboardConfig, TabConfig


def _codes(issues):
    return sorted(issue.code for issue in issues)


def _with_dashboard(bundle, **changes):
    dashboard = replace(bundle.config.dashboard, **changes)
    return CustomizationBundle(
        config=replace(bundle.config, dashboard=dashboard),
        components=bundle.components,
        data=bundle.data,
    )


def test_tab_without_component_is_a_warning(sample_bundle):
    issues = check_bundle(sample_bundle)
    assert _codes(issues) == ["missing-component"]
    assert issues[0].severity == SEVERITY_WARNING
    assert issues[0].location == "dashboard.tabs.reports"


def test_duplicate_tab_ids(sample_bundle):
    tabs = list(sample_bundle.config.dashboard.tabs) + [TabConfig(id="search", label="Again")]
    issues = check_bundle(_with_dashboard(sample_bundle, tabs=tabs))
    assert "duplicate-tab-id" in _codes(issues)


def test_colors_must_cover_data_keys(sample_bundle):
    charts = {
        "short": ChartConfig(
            type="bar",
            data_keys=["a", "b"],
            colors=["#000"],
            data=[{"x": 1, "a": 1, "b": 2}],
        )
    }
    issues = check_bundle(_with_dashboard(sample_bundle, charts=charts))
    assert "missing-colors" in _codes(issues)


def test_data_keys_must_exist_in_every_record(sample_bundle):
    charts = {
        "gaps": ChartConfig(
            type="line",
            data_keys=["a"],
            colors=["#000"],
            data=[{"x": 1, "a": 1}, {"x": 2}],
        )
    }
    issues = [i for i in check_bundle(_with_dashboard(sample_bundle, charts=charts)) if i.code == "missing-data-key"]
    assert len(issues) == 1
    assert issues[0].location == "dashboard.charts.gaps.data[1]"


def test_unknown_chart_type_and_feature(sample_bundle):
    charts = {
        "odd": ChartConfig(type="donut", data_keys=["a"], colors=["#0"], data=[{"a": 1}], feature="ghost"),
    }
    codes = _codes(check_bundle(_with_dashboard(sample_bundle, charts=charts)))
    assert "unknown-chart-type" in codes
    assert "unknown-feature" in codes


def test_ensure_valid_tolerates_issues_by_default(sample_bundle, caplog):
    tabs = [TabConfig(id="a", label="A"), TabConfig(id="a", label="B")]
    bundle = _with_dashboard(sample_bundle, tabs=tabs)
    with caplog.at_level("WARNING"):
        issues = ensure_valid(bundle)
    assert "duplicate-tab-id" in _codes(issues)
    assert "duplicate-tab-id" in caplog.text


def test_ensure_valid_strict_raises_on_errors(sample_bundle):
    bundle = _with_dashboard(sample_bundle, tabs=[TabConfig(id="a", label="A"), TabConfig(id="a", label="B")])
    with pytest.raises(BundleValidationError) as excinfo:
        ensure_valid(bundle, strict=True)
    assert [issue.code for issue in excinfo.value.issues] == ["duplicate-tab-id"]


def test_ensure_valid_strict_ignores_warnings(sample_bundle):
    # Only a missing component: the host falls back to a placeholder.
    issues = ensure_valid(sample_bundle, strict=True)
    assert _codes(issues) == ["missing-component"]


def test_empty_dashboard_has_no_issues(sample_bundle):
    bundle = _with_dashboard(sample_bundle, tabs=[], charts={})
    bundle = CustomizationBundle(
        config=replace(bundle.config, analytics=replace(bundle.config.analytics, charts={})),
    )
    assert check_bundle(bundle) == []
    assert isinstance(bundle.config.dashboard, DashboardConfig)
