"""
Application-wide settings read from the environment (and st.secrets).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_TENANT = "bonjour"
DEFAULT_SEARCH_DELAY = 1.5
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    tenant: str = DEFAULT_TENANT
    strict_checks: bool = False
    search_delay: float = DEFAULT_SEARCH_DELAY
    log_level: str = DEFAULT_LOG_LEVEL


def _get(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(name)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _parse_float(raw: Optional[str], name: str, default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default
    return max(value, 0.0)


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `env` (defaults to os.environ).

    Call `bootstrap_env.ensure_env()` first so st.secrets and .env values are
    already present in the environment.
    """
    env = os.environ if env is None else env
    strict_raw = _get(env, "DASHBOARD_STRICT_CHECKS")
    log_level = (_get(env, "DASHBOARD_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        logger.warning("Unknown DASHBOARD_LOG_LEVEL %r, using %s", log_level, DEFAULT_LOG_LEVEL)
        log_level = DEFAULT_LOG_LEVEL
    return Settings(
        tenant=_get(env, "DASHBOARD_TENANT") or DEFAULT_TENANT,
        strict_checks=strict_raw is not None and strict_raw.lower() in _TRUTHY,
        search_delay=_parse_float(_get(env, "DASHBOARD_SEARCH_DELAY"), "DASHBOARD_SEARCH_DELAY", DEFAULT_SEARCH_DELAY),
        log_level=log_level,
    )
