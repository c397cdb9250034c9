"""Test suite package configuration.

Some CI environments invoke :mod:`pytest` via the console script entry point,
which does not always put the project root on ``sys.path``. Without it,
``import mma_scheduler`` fails for a source checkout that was not installed.
"""

from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT: Path = Path(__file__).resolve().parent.parent


def _ensure_repo_on_path() -> None:
    """Insert the repository root into ``sys.path`` when it is missing."""

    repo_root_str: str = str(_REPO_ROOT)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_on_path()
