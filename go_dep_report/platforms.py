"""Platform-specific behaviour, selected once at startup.

Windows keeps file handles open briefly after a child process exits, so
removing a fresh clone can fail transiently. There the workspace lives at a
stable, pre-created path and removal is retried; elsewhere a unique temp
directory is removed once.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Platform:
    """Capabilities that differ between operating system families.

    Attributes:
        name: Human-readable platform family.
        shared_workspace: Use a stable workspace path instead of a unique one.
        removal_attempts: How many times to try removing the workspace.
        removal_delay: Seconds to wait between removal attempts.
        shell_wrapper: Prefix for commands that must go through the shell.
    """

    name: str
    shared_workspace: bool = False
    removal_attempts: int = 1
    removal_delay: float = 0.0
    shell_wrapper: tuple[str, ...] = ()

    def clone_command(self, git: str, url: str, destination: str) -> list[str]:
        """Build the argument vector for `git clone url destination`."""
        return [*self.shell_wrapper, git, "clone", url, destination]


POSIX = Platform(name="posix")

WINDOWS = Platform(
    name="windows",
    shared_workspace=True,
    removal_attempts=3,
    removal_delay=0.2,
    shell_wrapper=("cmd", "/C"),
)


def detect_platform() -> Platform:
    """Return the Platform for the running interpreter."""
    return WINDOWS if os.name == "nt" else POSIX
