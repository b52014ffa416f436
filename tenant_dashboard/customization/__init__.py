"""
Customization contract shared by the host shell and tenant packages.
"""

from tenant_dashboard.customization.bundle import CustomizationBundle
from tenant_dashboard.customization.data_bag import CustomData
from tenant_dashboard.customization.errors import (
    BundleValidationError,
    CustomizationError,
    InvalidTenantError,
    TenantNotFoundError,
)
from tenant_dashboard.customization.registry import ComponentRegistry, Renderer
from tenant_dashboard.customization.schema import (
    AnalyticsConfig,
    AppConfig,
    ChartConfig,
    ChartType,
    ClientConfig,
    DashboardConfig,
    TabConfig,
)

__all__ = [
    "AnalyticsConfig",
    "AppConfig",
    "BundleValidationError",
    "ChartConfig",
    "ChartType",
    "ClientConfig",
    "ComponentRegistry",
    "CustomData",
    "CustomizationBundle",
    "CustomizationError",
    "DashboardConfig",
    "InvalidTenantError",
    "Renderer",
    "TabConfig",
    "TenantNotFoundError",
]
