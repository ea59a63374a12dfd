"""Clone a remote repository into the workspace."""

from __future__ import annotations

import subprocess
from pathlib import Path

from .errors import FetchError
from .platforms import Platform
from .shell import run


def fetch(
    url: str, destination: Path, *, platform: Platform, git: str = "git"
) -> None:
    """Clone url into destination, streaming git's output to the terminal.

    Raises:
        FetchError: If git cannot be started or exits non-zero.
    """
    cmd = platform.clone_command(git, url, str(destination))
    try:
        run(*cmd)
    except subprocess.CalledProcessError as exc:
        raise FetchError(
            f"error cloning repository: git exited with status {exc.returncode}"
        ) from exc
    except OSError as exc:
        raise FetchError(f"error cloning repository: {exc}") from exc
