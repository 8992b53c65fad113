"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubefilter.models.config import FilterConfig, KubeFilterConfig, LogConfig
from kubefilter.observability.logging import get_logger

_logger = get_logger("config")

ADVANCED_FILTERS_ENV = "ADVANCED_FILTERS"

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEFILTER_{key}", default)


def parse_bool(value: str) -> bool:
    """Parse the standard textual boolean forms.

    Raises ValueError for anything outside the accepted set.
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_filter_config() -> FilterConfig:
    """Read the advanced filtering toggle.

    An unset or empty variable disables filtering.  An unparseable value is
    logged and also disables filtering, so misconfiguration never drops events.
    """
    raw = os.environ.get(ADVANCED_FILTERS_ENV, "")
    if not raw:
        return FilterConfig(enabled=False)
    try:
        enabled = parse_bool(raw)
    except ValueError:
        _logger.warning("invalid_advanced_filters_value", value=raw, detail="defaulting to false")
        enabled = False
    return FilterConfig(enabled=enabled)


def load_log_config() -> LogConfig:
    return LogConfig(level=_validate_log_level(_env("LOG_LEVEL", "info")))


def load_config() -> KubeFilterConfig:
    """Load configuration from ADVANCED_FILTERS and KUBEFILTER_* environment variables."""
    return KubeFilterConfig(filter=load_filter_config(), log=load_log_config())
