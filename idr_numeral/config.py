"""Configuration loader for the idr-numeral command-line front end."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from .models import DECIMALS_PRESERVE, PARSE_MODES


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


def _get_decimals(key: str) -> Union[int, str]:
    value = _get_env(key, DECIMALS_PRESERVE)
    if value.lower() == DECIMALS_PRESERVE:
        return DECIMALS_PRESERVE
    try:
        decimals = int(value)
    except ValueError as exc:
        raise ValueError(
            f"Environment variable {key} must be '{DECIMALS_PRESERVE}' or a non-negative integer"
        ) from exc
    if decimals < 0:
        raise ValueError(
            f"Environment variable {key} must be '{DECIMALS_PRESERVE}' or a non-negative integer"
        )
    return decimals


@dataclass(slots=True)
class AppConfig:
    log_level: str
    decimals: Union[int, str]
    pad_zeros: bool
    parse_mode: str


def load_config() -> AppConfig:
    log_level = _get_env("IDR_LOG_LEVEL", "INFO").upper()
    decimals = _get_decimals("IDR_DECIMALS")
    pad_zeros = _get_bool("IDR_PAD_ZEROS", False)

    parse_mode = _get_env("IDR_PARSE_MODE", "approximate").lower()
    if parse_mode not in PARSE_MODES:
        raise ValueError(
            f"Environment variable IDR_PARSE_MODE must be one of {', '.join(PARSE_MODES)}"
        )

    return AppConfig(
        log_level=log_level,
        decimals=decimals,
        pad_zeros=pad_zeros,
        parse_mode=parse_mode,
    )
