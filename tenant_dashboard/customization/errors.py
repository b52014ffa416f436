"""
Exceptions raised at the host boundary when a tenant bundle cannot be used.

Building a bundle never raises; these only surface while locating a tenant
or when strict checks are switched on.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from tenant_dashboard.customization.checks import BundleIssue


class CustomizationError(Exception):
    """Base class for tenant customization failures."""


class TenantNotFoundError(CustomizationError):
    def __init__(self, tenant: str):
        super().__init__(f"No tenant package named '{tenant}'")
        self.tenant = tenant


class InvalidTenantError(CustomizationError):
    def __init__(self, tenant: str, reason: str):
        super().__init__(f"Tenant '{tenant}' is not usable: {reason}")
        self.tenant = tenant
        self.reason = reason


class BundleValidationError(CustomizationError):
    def __init__(self, issues: List["BundleIssue"]):
        summary = "; ".join(f"{issue.location}: {issue.message}" for issue in issues)
        super().__init__(f"{len(issues)} bundle issue(s): {summary}")
        self.issues = list(issues)
