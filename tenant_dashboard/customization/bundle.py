"""
The customization bundle a tenant package exports as `customization`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from tenant_dashboard.customization.data_bag import CustomData
from tenant_dashboard.customization.registry import ComponentRegistry, Renderer
from tenant_dashboard.customization.schema import AppConfig


@dataclass(frozen=True)
class CustomizationBundle:
    """Config, component registry and auxiliary data for one tenant.

    Built once when the tenant module is imported and never updated.
    """

    config: AppConfig
    components: ComponentRegistry = field(default_factory=ComponentRegistry)
    data: CustomData = field(default_factory=CustomData)

    def __post_init__(self) -> None:
        if not isinstance(self.components, ComponentRegistry):
            object.__setattr__(self, "components", ComponentRegistry(self.components))
        if not isinstance(self.data, CustomData):
            object.__setattr__(self, "data", CustomData(self.data))

    def override_for(self, tab_id: str) -> Optional[Renderer]:
        return self.components.lookup(tab_id)
