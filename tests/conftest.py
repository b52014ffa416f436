"""
Shared fixtures for bundle, registry and rendering tests.
"""
from typing import Dict, List

import pytest

from tenant_dashboard.customization.bundle import CustomizationBundle
from tenant_dashboard.customization.schema import (
    AnalyticsConfig,
    AppConfig,
    ChartConfig,
    DashboardConfig,
    TabConfig,
)


@pytest.fixture
def calls() -> List[str]:
    return []


@pytest.fixture
def sample_config() -> AppConfig:
    return AppConfig(
        title="Acme - Portal",
        company_name="Acme",
        user_name="Sam",
        dashboard=DashboardConfig(
            tabs=[
                TabConfig(id="search", label="Search", feature="search"),
                TabConfig(id="reports", label="Reports"),
            ],
            charts={
                "sales": ChartConfig(
                    type="bar",
                    data_keys=["revenue", "cost"],
                    colors=["#111111", "#222222"],
                    data=[
                        {"month": "Jan", "revenue": 10, "cost": 4},
                        {"month": "Feb", "revenue": 12, "cost": 5},
                    ],
                ),
                "bookings": ChartConfig(
                    type="pie",
                    data_keys=["value"],
                    colors=["#111111", "#222222"],
                    data=[{"name": "A", "value": 70}, {"name": "B", "value": 30}],
                    feature="booking",
                ),
            },
        ),
        analytics=AnalyticsConfig(
            charts={
                "trend": ChartConfig(
                    type="line",
                    data_keys=["visits"],
                    colors=["#333333"],
                    data=[{"day": "Mon", "visits": 3}, {"day": "Tue", "visits": 5}],
                ),
            }
        ),
        features={"search": True, "booking": False, "reporting": True},
    )


@pytest.fixture
def sample_bundle(sample_config, calls) -> CustomizationBundle:
    def search_unit(config: AppConfig) -> None:
        calls.append(f"search:{config.company_name}")

    return CustomizationBundle(
        config=sample_config,
        components={"search": search_unit},
        data={"regions": ["North", "South"]},
    )


@pytest.fixture
def session_store() -> Dict[str, object]:
    return {}
