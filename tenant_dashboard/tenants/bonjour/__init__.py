"""
Bonjour Investments: serviced-apartment sourcing for corporate and insurance
clients. Exports the tenant's `customization` bundle.
"""

from tenant_dashboard.customization.bundle import CustomizationBundle
from tenant_dashboard.customization.registry import ComponentRegistry
from tenant_dashboard.tenants.bonjour.components import (
    email_template_component,
    search_component,
    supplier_database_component,
)
from tenant_dashboard.tenants.bonjour.config import custom_config
from tenant_dashboard.tenants.bonjour.data import custom_data

custom_components = ComponentRegistry(
    {
        "search": search_component,
        "emailTemplate": email_template_component,
        "supplierDatabase": supplier_database_component,
    }
)

customization = CustomizationBundle(
    config=custom_config,
    components=custom_components,
    data=custom_data,
)

__all__ = ["customization"]
