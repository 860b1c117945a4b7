"""
Settings — environment-driven configuration.

Values come from the process environment, with a `.env` file in the
working directory loaded first when present.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


@dataclass(frozen=True, slots=True)
class Settings:
    currency: str = "USD"
    max_quantity: int = 99
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    try:
        max_quantity = _get_int("CARTKIT_MAX_QUANTITY", default=99) or 0
    except ValueError:
        raise RuntimeError("CARTKIT_MAX_QUANTITY must be an integer") from None

    loaded = Settings(
        currency=(_get_env("CARTKIT_CURRENCY", default="USD") or "USD").upper(),
        max_quantity=max_quantity,
        log_level=(_get_env("CARTKIT_LOG_LEVEL", default="WARNING") or "WARNING").upper(),
    )
    if loaded.max_quantity < 1:
        raise RuntimeError("CARTKIT_MAX_QUANTITY must be at least 1")
    if loaded.log_level not in logging.getLevelNamesMapping():
        raise RuntimeError(f"CARTKIT_LOG_LEVEL is not a logging level: {loaded.log_level}")
    return loaded


settings = load_settings()

__all__ = ("Settings", "load_settings", "settings")
