"""
Free-form tenant reference data shared with custom components by key.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Tuple


class CustomData(Mapping[str, Any]):
    """Read-only key/value bag. Absent keys read as empty, never as errors."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values = MappingProxyType(dict(values or {}))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"CustomData({sorted(self._values)})"

    def get_list(self, key: str) -> Tuple[Any, ...]:
        value = self._values.get(key)
        if isinstance(value, (list, tuple)):
            return tuple(value)
        return ()
