"""Startup checks for the New Relic Lambda extension."""

from .checks import CheckError, MissingHandlerError, handler_check, run_checks
from .config import Configuration, load_config
from .runtime import RUNTIME_SPECS, RegistrationResponse, RuntimeSpec, detect_runtime

__version__ = "0.1.0"

__all__ = [
    "CheckError",
    "MissingHandlerError",
    "handler_check",
    "run_checks",
    "Configuration",
    "load_config",
    "RUNTIME_SPECS",
    "RegistrationResponse",
    "RuntimeSpec",
    "detect_runtime",
]
