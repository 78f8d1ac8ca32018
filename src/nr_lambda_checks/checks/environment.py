"""Environment signals that let the handler probe be skipped."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Mapping, Optional

from ..utils.path import path_exists

if TYPE_CHECKING:
    from ..config.parser import Configuration

ESM_ENV = "NEW_RELIC_USE_ESM"
EXECUTION_ENV = "AWS_EXECUTION_ENV"

# Created by Docker at the container root
DOCKER_ENV_SENTINEL = "/.dockerenv"


def _env(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def is_esm_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """NEW_RELIC_USE_ESM is "true" (any case)."""
    return _env(environ).get(ESM_ENV, "").lower() == "true"


def is_native_platform(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Running on Lambda itself rather than in a local or custom container."""
    return _env(environ).get(EXECUTION_ENV, "").lower().startswith("aws_lambda")


def is_container(
    environ: Optional[Mapping[str, str]] = None,
    sentinel: str = DOCKER_ENV_SENTINEL,
) -> bool:
    """Not on the native platform, or the Docker sentinel file is present."""
    if not is_native_platform(environ):
        return True
    return path_exists(sentinel)


def bypass_reason(
    config: Configuration,
    environ: Optional[Mapping[str, str]] = None,
    sentinel: str = DOCKER_ENV_SENTINEL,
) -> Optional[str]:
    """Why the handler probe should be skipped, or None to run it.

    ``config.testing_override`` disables every bypass. A present Docker
    sentinel skips the probe even on the native platform.

    Returns:
        "esm", "container" or None
    """
    if config.testing_override:
        return None
    if is_esm_enabled(environ):
        return "esm"
    if is_container(environ, sentinel):
        return "container"
    return None
