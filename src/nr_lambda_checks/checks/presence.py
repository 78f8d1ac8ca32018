"""Check that a runtime's handler file exists in the deployment bundle."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..runtime.resolver import DEFAULT_DEPLOYMENT_ROOT, HandlerResolver
from ..runtime.specs import RuntimeSpec
from ..runtime.types import HandlerInvocation
from ..utils.path import path_exists
from .environment import DOCKER_ENV_SENTINEL, bypass_reason

logger = logging.getLogger(__name__)


def get_true_handler(
    spec: RuntimeSpec,
    invocation: HandlerInvocation,
    environ: Optional[Mapping[str, str]] = None,
    sentinel: str = DOCKER_ENV_SENTINEL,
) -> str:
    """Work out which handler the user's code actually lives under.

    When the platform handler is the New Relic wrapper, the real handler
    comes from ``NEW_RELIC_LAMBDA_HANDLER``. Otherwise the platform handler
    is used as-is, with a warning that the wrapper is not in place.
    """
    if bypass_reason(invocation.config, environ, sentinel):
        return invocation.handler_name

    return _select_handler(spec, invocation)


def _select_handler(spec: RuntimeSpec, invocation: HandlerInvocation) -> str:
    if invocation.handler_name != spec.wrapper_name:
        logger.warning(
            f"handler not set to New Relic layer wrapper {spec.wrapper_name}"
        )
        return invocation.handler_name

    return invocation.config.nr_handler


def check_presence(
    spec: RuntimeSpec,
    invocation: HandlerInvocation,
    deployment_root: str = DEFAULT_DEPLOYMENT_ROOT,
    environ: Optional[Mapping[str, str]] = None,
    sentinel: str = DOCKER_ENV_SENTINEL,
) -> bool:
    """Return True if the handler's source file is in the bundle.

    Skips the probe (and returns True) for ESM functions and for functions
    not running on the native platform, unless the config's testing
    override is set.

    Args:
        spec: Runtime being checked
        invocation: Handler name and configuration
        deployment_root: Directory the bundle is unpacked into
        environ: Environment to read (defaults to ``os.environ``)
        sentinel: Container sentinel file

    Returns:
        Whether any candidate file exists
    """
    reason = bypass_reason(invocation.config, environ, sentinel)
    if reason:
        logger.debug(f"Skipping handler file check ({reason})")
        return True

    handler = _select_handler(spec, invocation)
    resolver = HandlerResolver(deployment_root)
    candidates = resolver.candidate_paths(spec, handler)

    for candidate in candidates:
        if path_exists(candidate):
            logger.debug(f"Found handler file {candidate}")
            return True

    logger.debug(f"No handler file found among {candidates}")
    return False
