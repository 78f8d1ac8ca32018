"""Extension configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Set

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()

# Value of NEW_RELIC_LAMBDA_HANDLER when the user has not set one
EMPTY_NR_WRAPPER = "Undefined"

HANDLER_ENV = "NEW_RELIC_LAMBDA_HANDLER"
IGNORE_CHECKS_ENV = "NEW_RELIC_IGNORE_EXTENSION_CHECKS"


@dataclass
class Configuration:
    """Configuration consumed by the startup checks.

    Attributes:
        nr_handler: The user's real handler when the New Relic wrapper is the
            platform handler
        testing_override: Disable environment-based bypasses so the file
            probe always runs (tests only)
        ignore_extension_checks: Lower-cased names of checks to skip, or
            "all"
    """

    nr_handler: str = EMPTY_NR_WRAPPER
    testing_override: bool = False
    ignore_extension_checks: Set[str] = field(default_factory=set)

    def is_check_ignored(self, name: str) -> bool:
        """Whether the named check is disabled."""
        ignored = self.ignore_extension_checks
        return "all" in ignored or name.lower() in ignored


def parse_ignored_checks(value: Optional[str]) -> Set[str]:
    """Parse a comma-separated list of check names."""
    if not value:
        return set()
    return {part.strip().lower() for part in value.split(",") if part.strip()}


def load_config(environ: Optional[Mapping[str, str]] = None) -> Configuration:
    """Load configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Configuration with loaded or default values
    """
    if environ is None:
        environ = os.environ

    config = Configuration()

    nr_handler = environ.get(HANDLER_ENV, "").strip()
    if nr_handler:
        config.nr_handler = nr_handler

    config.ignore_extension_checks = parse_ignored_checks(
        environ.get(IGNORE_CHECKS_ENV)
    )

    return config
