"""
Private interactive state for a single registered component.

Streamlit keeps widget state in `st.session_state` across reruns. Each
component gets its own prefixed namespace there so two components can use the
same field names without seeing each other's values.
"""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

import streamlit as st


class ComponentState:
    def __init__(self, namespace: str, store: Optional[MutableMapping[str, Any]] = None):
        self.namespace = namespace
        self._store = store if store is not None else st.session_state

    def key(self, name: str) -> str:
        """Fully qualified key, also usable as a Streamlit widget key."""
        return f"{self.namespace}__{name}"

    def get(self, name: str, default: Any = None) -> Any:
        return self._store.get(self.key(name), default)

    def set(self, name: str, value: Any) -> None:
        self._store[self.key(name)] = value

    def setdefault(self, name: str, value: Any) -> Any:
        full_key = self.key(name)
        if full_key not in self._store:
            self._store[full_key] = value
        return self._store[full_key]

    def clear(self) -> None:
        prefix = f"{self.namespace}__"
        for full_key in [k for k in list(self._store.keys()) if str(k).startswith(prefix)]:
            del self._store[full_key]
