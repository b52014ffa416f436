"""
Locate a tenant package and return the bundle it exports.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from functools import lru_cache
from typing import List

from tenant_dashboard.customization.bundle import CustomizationBundle
from tenant_dashboard.customization.errors import InvalidTenantError, TenantNotFoundError

logger = logging.getLogger(__name__)

TENANTS_PACKAGE = "tenant_dashboard.tenants"
BUNDLE_ATTRIBUTE = "customization"


def available_tenants() -> List[str]:
    package = importlib.import_module(TENANTS_PACKAGE)
    return sorted(module.name for module in pkgutil.iter_modules(package.__path__))


@lru_cache(maxsize=None)
def load_bundle(tenant: str) -> CustomizationBundle:
    """Import `tenant_dashboard.tenants.<tenant>` once and return its bundle."""
    module_name = f"{TENANTS_PACKAGE}.{tenant}"
    if tenant not in available_tenants():
        raise TenantNotFoundError(tenant)
    module = importlib.import_module(module_name)

    bundle = getattr(module, BUNDLE_ATTRIBUTE, None)
    if bundle is None:
        raise InvalidTenantError(tenant, f"module does not export '{BUNDLE_ATTRIBUTE}'")
    if not isinstance(bundle, CustomizationBundle):
        raise InvalidTenantError(
            tenant,
            f"'{BUNDLE_ATTRIBUTE}' is a {type(bundle).__name__}, not a CustomizationBundle",
        )
    logger.info(
        "Loaded tenant '%s' (%d tab(s), %d component(s))",
        tenant,
        len(bundle.config.dashboard.tabs),
        len(bundle.components),
    )
    return bundle
