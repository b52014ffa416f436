from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tenant_dashboard.customization.bundle import CustomizationBundle
from tenant_dashboard.customization.schema import AppConfig, ClientConfig


@dataclass
class PageContext:
    bundle: CustomizationBundle
    selected_client: Optional[ClientConfig] = None

    @property
    def config(self) -> AppConfig:
        return self.bundle.config
