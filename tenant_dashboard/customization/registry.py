"""
Registry of tenant components keyed by identifier (usually a tab id).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional

from tenant_dashboard.customization.schema import AppConfig

logger = logging.getLogger(__name__)

# A renderer draws one UI fragment from the current config and nothing else.
Renderer = Callable[[AppConfig], None]


class ComponentRegistry(Mapping[str, Renderer]):
    """Read-only mapping from identifier to renderer.

    Lookups use exact identifier matches. A missing identifier means "no
    override"; what to draw instead is left to the host.
    """

    def __init__(self, components: Optional[Mapping[str, Renderer]] = None):
        self._components = MappingProxyType(dict(components or {}))

    def __getitem__(self, identifier: str) -> Renderer:
        return self._components[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        return f"ComponentRegistry({sorted(self._components)})"

    def lookup(self, identifier: str) -> Optional[Renderer]:
        return self._components.get(identifier)

    def render(self, identifier: str, config: AppConfig) -> bool:
        """Draw the override for `identifier`; False when none is registered."""
        renderer = self.lookup(identifier)
        if renderer is None:
            logger.debug("No component override for '%s'", identifier)
            return False
        renderer(config)
        return True
