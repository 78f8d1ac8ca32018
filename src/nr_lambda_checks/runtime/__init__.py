"""Runtime registry and handler resolution."""

from .resolver import (
    DEFAULT_DEPLOYMENT_ROOT,
    HandlerResolver,
    path_formatter,
    remove_path_method_name,
    remove_path_method_name_node,
)
from .specs import (
    EMPTY_RUNTIME,
    NODE,
    PYTHON,
    RUNTIME_SPECS,
    RuntimeSpec,
    detect_runtime,
    get_runtime_spec,
)
from .types import HandlerInvocation, RegistrationResponse

__all__ = [
    "DEFAULT_DEPLOYMENT_ROOT",
    "HandlerResolver",
    "path_formatter",
    "remove_path_method_name",
    "remove_path_method_name_node",
    "EMPTY_RUNTIME",
    "NODE",
    "PYTHON",
    "RUNTIME_SPECS",
    "RuntimeSpec",
    "detect_runtime",
    "get_runtime_spec",
    "HandlerInvocation",
    "RegistrationResponse",
]
