"""Find the module manifest inside a checkout."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ManifestNotFoundError, WalkError

MANIFEST_NAME = "go.mod"


def locate(root: Path, manifest_name: str = MANIFEST_NAME) -> Path:
    """Return the first file named manifest_name under root.

    The walk is depth-first and sorted by name, so the result is stable
    for a given tree. A directory's own files are checked before any of
    its subdirectories, which makes a root-level manifest win over nested
    ones.

    Raises:
        WalkError: If a directory cannot be listed.
        ManifestNotFoundError: If no such file exists.
    """

    def _on_error(exc: OSError) -> None:
        raise WalkError(f"error walking {exc.filename or root}: {exc}") from exc

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        if manifest_name in filenames:
            candidate = Path(dirpath) / manifest_name
            if candidate.is_file():
                return candidate

    raise ManifestNotFoundError(f"could not find {manifest_name} in {root}")
