"""Run the startup checks and collect their failures."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Tuple

from ..config.parser import Configuration
from ..runtime.resolver import DEFAULT_DEPLOYMENT_ROOT
from ..runtime.specs import RuntimeSpec
from ..runtime.types import RegistrationResponse
from .environment import DOCKER_ENV_SENTINEL
from .errors import CheckError
from .handler import handler_check

logger = logging.getLogger(__name__)

CheckFn = Callable[..., None]

# Run in order; names match NEW_RELIC_IGNORE_EXTENSION_CHECKS entries
CHECKS: List[Tuple[str, CheckFn]] = [
    ("handler", handler_check),
]


def run_checks(
    ctx: Any,
    config: Configuration,
    registration: RegistrationResponse,
    runtime: RuntimeSpec,
    deployment_root: str = DEFAULT_DEPLOYMENT_ROOT,
    environ: Optional[Mapping[str, str]] = None,
    sentinel: str = DOCKER_ENV_SENTINEL,
) -> List[CheckError]:
    """Run every enabled check.

    Failures are logged and returned; they never abort the remaining checks.

    Returns:
        The errors raised by failing checks, in check order
    """
    errors: List[CheckError] = []

    for name, check in CHECKS:
        if config.is_check_ignored(name):
            logger.debug(f"Skipping ignored check: {name}")
            continue

        try:
            check(
                ctx,
                config,
                registration,
                runtime,
                deployment_root=deployment_root,
                environ=environ,
                sentinel=sentinel,
            )
        except CheckError as e:
            logger.error(f"Startup check failed: {e}")
            errors.append(e)

    return errors
