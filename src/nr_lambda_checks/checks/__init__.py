"""Startup checks run by the extension before it starts serving."""

from .environment import (
    DOCKER_ENV_SENTINEL,
    bypass_reason,
    is_container,
    is_esm_enabled,
    is_native_platform,
)
from .errors import CheckError, MissingHandlerError
from .handler import handler_check
from .presence import check_presence, get_true_handler
from .runner import CHECKS, run_checks

__all__ = [
    "DOCKER_ENV_SENTINEL",
    "bypass_reason",
    "is_container",
    "is_esm_enabled",
    "is_native_platform",
    "CheckError",
    "MissingHandlerError",
    "handler_check",
    "check_presence",
    "get_true_handler",
    "CHECKS",
    "run_checks",
]
