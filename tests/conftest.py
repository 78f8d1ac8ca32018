"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from nr_lambda_checks.config import EMPTY_NR_WRAPPER, Configuration

CHECK_ENV_VARS = [
    "NEW_RELIC_USE_ESM",
    "AWS_EXECUTION_ENV",
    "NEW_RELIC_LAMBDA_HANDLER",
    "NEW_RELIC_IGNORE_EXTENSION_CHECKS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without any of the variables the checks read."""
    for name in CHECK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def deployment_root() -> Generator[Path, None, None]:
    """Create an empty ``<tmp>/var/task`` deployment root."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        root = Path(tmp_dir) / "var" / "task"
        root.mkdir(parents=True)
        yield root


@pytest.fixture
def missing_sentinel(tmp_path) -> str:
    """A container sentinel path that does not exist.

    Tests run inside Docker more often than not, so the real ``/.dockerenv``
    cannot be relied on.
    """
    return str(tmp_path / "no-such-dockerenv")


@pytest.fixture
def testing_config() -> Configuration:
    """Configuration with bypasses disabled and no wrapper handler set."""
    return Configuration(nr_handler=EMPTY_NR_WRAPPER, testing_override=True)


@pytest.fixture
def make_handler_file(deployment_root):
    """Factory creating empty files under the deployment root."""

    def _make(relative: str) -> Path:
        path = deployment_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        return path

    return _make
