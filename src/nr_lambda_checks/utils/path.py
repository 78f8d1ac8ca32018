"""Filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union


def path_exists(path: Union[str, Path]) -> bool:
    """Return True if ``path`` can be stat'ed.

    Permission errors, bad paths and other OS failures count as missing.

    Examples:
        >>> path_exists("/var/task/index.js")
        False
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True
