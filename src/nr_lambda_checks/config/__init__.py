"""Configuration management for the extension checks."""

from .parser import (
    EMPTY_NR_WRAPPER,
    Configuration,
    load_config,
    parse_ignored_checks,
)

__all__ = [
    "EMPTY_NR_WRAPPER",
    "Configuration",
    "load_config",
    "parse_ignored_checks",
]
