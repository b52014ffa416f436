"""
Configuration schema every tenant bundle conforms to.

Instances are assembled from plain literals in the tenant package. Building
them performs no validation and cannot fail: lists are frozen into tuples and
dicts into read-only mapping proxies, but a duplicate tab id or a chart data
key missing from its records is left for `customization.checks` (or the
host) to notice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple


class ChartType(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    AREA = "area"


Record = Mapping[str, Any]


def freeze_mapping(values: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(values, MappingProxyType):
        return values
    return MappingProxyType(dict(values or {}))


def freeze_records(records: Optional[Iterable[Mapping[str, Any]]]) -> Tuple[Record, ...]:
    return tuple(freeze_mapping(record) for record in (records or ()))


@dataclass(frozen=True)
class ChartConfig:
    """A chart definition: series `data_keys` plotted from `data` records.

    `colors[i]` is applied to `data_keys[i]`; for pie charts the colours are
    applied to the slices instead. `feature` names the flag that has to be on
    for the host to show the chart.
    """

    type: str
    data_keys: Tuple[str, ...]
    colors: Tuple[str, ...]
    data: Tuple[Record, ...]
    feature: Optional[str] = None
    title: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_keys", tuple(self.data_keys))
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "data", freeze_records(self.data))

    def category_key(self) -> Optional[str]:
        """First record field that is not a series key (x axis / slice names)."""
        for record in self.data:
            for key in record:
                if key not in self.data_keys:
                    return key
        return None

    def color_for(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return None


@dataclass(frozen=True)
class TabConfig:
    id: str
    label: str
    description: str = ""
    icon: Optional[str] = None
    feature: Optional[str] = None


@dataclass(frozen=True)
class ClientConfig:
    id: str
    name: str
    industry: str = ""


@dataclass(frozen=True)
class DashboardConfig:
    tabs: Tuple[TabConfig, ...] = ()
    charts: Mapping[str, ChartConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tabs", tuple(self.tabs))
        object.__setattr__(self, "charts", freeze_mapping(self.charts))


@dataclass(frozen=True)
class AnalyticsConfig:
    charts: Mapping[str, ChartConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "charts", freeze_mapping(self.charts))


@dataclass(frozen=True)
class AppConfig:
    title: str
    company_name: str
    logo: Optional[str] = None
    primary_color: str = "#1f77b4"
    secondary_color: str = "#aec7e8"
    user_name: Optional[str] = None
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)
    clients: Tuple[ClientConfig, ...] = ()
    features: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "clients", tuple(self.clients))
        object.__setattr__(self, "features", freeze_mapping(self.features))

    def is_enabled(self, flag: Optional[str]) -> bool:
        """True when `flag` is None (ungated) or declared and switched on."""
        if flag is None:
            return True
        return bool(self.features.get(flag, False))
