from __future__ import annotations

import subprocess
from pathlib import Path

__version__ = "0.1.0"


def _git_short_hash() -> str | None:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=Path(__file__).resolve().parent,
            capture_output=True,
            text=True,
        )
    except OSError:
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout.strip() or None


def get_version_string() -> str:
    git_hash = _git_short_hash()
    if git_hash is None:
        return __version__
    return f"{__version__} ({git_hash})"
