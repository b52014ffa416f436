"""
Bootstrap environment for Streamlit Cloud & local dev:
- Flatten st.secrets into uppercase os.environ keys (nested -> PREFIX_CHILD)
- Then load .env (without overriding existing env vars)
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, Iterator, Tuple

import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _sanitize_key(key: str) -> str:
    # Uppercase and replace non-alphanumeric with underscores
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten_secrets(prefix: str, val: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(val, dict):
        for k, v in val.items():
            yield from _flatten_secrets(f"{prefix}_{k}", v)
    else:
        yield _sanitize_key(prefix), str(val)


def read_secrets() -> Dict[str, Any]:
    """Return st.secrets as a plain dict, or {} outside a configured runtime."""
    try:
        items = getattr(st, "secrets", None)
        if not items:
            return {}
        return items.to_dict()  # type: ignore[attr-defined]
    except Exception as exc:
        # st.secrets raises when no secrets.toml exists locally
        logger.debug("Streamlit secrets unavailable: %s", exc)
        return {}


def _bridge_secrets_to_env() -> None:
    for key, value in read_secrets().items():
        for flat_k, flat_v in _flatten_secrets(key, value):
            os.environ.setdefault(flat_k, flat_v)


def ensure_env() -> None:
    """Idempotent: make sure env vars are available.
    Safe to call multiple times, both inside and outside Streamlit runtime.
    """
    _bridge_secrets_to_env()
    # load_dotenv will not override existing env vars by default
    load_dotenv()
