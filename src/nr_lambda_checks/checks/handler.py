"""Startup check that the function handler file exists."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..config.parser import Configuration
from ..runtime.resolver import DEFAULT_DEPLOYMENT_ROOT
from ..runtime.specs import RuntimeSpec
from ..runtime.types import HandlerInvocation, RegistrationResponse
from .environment import DOCKER_ENV_SENTINEL
from .errors import MissingHandlerError
from .presence import check_presence


def handler_check(
    ctx: Any,
    config: Configuration,
    registration: RegistrationResponse,
    runtime: RuntimeSpec,
    deployment_root: str = DEFAULT_DEPLOYMENT_ROOT,
    environ: Optional[Mapping[str, str]] = None,
    sentinel: str = DOCKER_ENV_SENTINEL,
) -> None:
    """Verify the registered handler resolves to a file in the bundle.

    Args:
        ctx: Unused; kept so all checks share one signature
        config: Extension configuration
        registration: Registration response carrying the platform handler
        runtime: Runtime spec; an empty language skips the check
        deployment_root: Directory the bundle is unpacked into
        environ: Environment to read (defaults to ``os.environ``)
        sentinel: Container sentinel file

    Raises:
        MissingHandlerError: If no candidate file exists
    """
    if not runtime.language:
        return

    invocation = HandlerInvocation(handler_name=registration.handler, config=config)

    if not check_presence(runtime, invocation, deployment_root, environ, sentinel):
        raise MissingHandlerError(invocation.handler_name, config.nr_handler)
