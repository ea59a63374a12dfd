"""Temporary workspace lifecycle.

The workspace holds one clone for the duration of a run. Once acquired it is
always released, whichever way the run ends.
"""

from __future__ import annotations

import os
import shutil
import stat
import sys
import tempfile
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .errors import WorkspaceError
from .platforms import Platform


def _make_writable(func, path, exc) -> None:
    """rmtree error handler: clear the read-only bit and retry the call.

    Windows refuses to delete read-only files, and git marks its pack files
    read-only.
    """
    if isinstance(exc, tuple):
        exc = exc[1]
    if not isinstance(exc, PermissionError):
        raise exc
    os.chmod(path, stat.S_IWRITE)
    func(path)


def _rmtree(path: Path) -> None:
    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=_make_writable)
    else:
        shutil.rmtree(path, onerror=_make_writable)


class WorkspaceManager:
    """Creates and removes the temporary checkout directory.

    Args:
        platform: Decides between a unique or a stable workspace path and
            how removal is retried.
        prefix: Directory name (stable path) or name prefix (unique path).
        temp_root: Parent directory; defaults to the system temp directory.
    """

    def __init__(
        self,
        platform: Platform,
        prefix: str = "go-dep-analysis",
        temp_root: Path | None = None,
    ) -> None:
        self.platform = platform
        self.prefix = prefix
        self.temp_root = temp_root or Path(tempfile.gettempdir())

    def acquire(self) -> Path:
        """Create the workspace directory and return its path."""
        try:
            if self.platform.shared_workspace:
                path = self.temp_root / self.prefix
                path.mkdir(parents=True, exist_ok=True)
                return path
            return Path(tempfile.mkdtemp(prefix=self.prefix, dir=self.temp_root))
        except OSError as exc:
            raise WorkspaceError(f"error creating temporary directory: {exc}") from exc

    def release(self, path: Path) -> None:
        """Remove the workspace and everything in it.

        A path that no longer exists counts as removed. Removal is tried
        platform.removal_attempts times with platform.removal_delay seconds
        between tries.
        """
        attempts = max(self.platform.removal_attempts, 1)
        last_error: OSError | None = None
        for attempt in range(attempts):
            try:
                _rmtree(path)
                return
            except FileNotFoundError:
                return
            except OSError as exc:
                last_error = exc
            if attempt < attempts - 1:
                time.sleep(self.platform.removal_delay)

        if attempts == 1:
            raise WorkspaceError(
                f"error removing temporary directory {path}: {last_error}"
            ) from last_error
        raise WorkspaceError(
            f"error removing temporary directory after {attempts} attempts"
        ) from last_error

    @contextmanager
    def workspace(self) -> Iterator[Path]:
        """Acquire a workspace for the body of a with-block, then release it."""
        path = self.acquire()
        try:
            yield path
        finally:
            self.release(path)
