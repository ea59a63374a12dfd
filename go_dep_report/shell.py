"""Shell utilities.

Provides simple wrappers around subprocess calls for running external
commands, plus output formatting helpers.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import click


def run(
    *args: str, cwd: Path | None = None, check: bool = True
) -> subprocess.CompletedProcess[bytes]:
    """Run a command with stdout and stderr streamed to the terminal.

    Used for long-running commands (e.g. git clone) whose progress the
    user should see.

    Args:
        *args: Command and arguments (e.g., "git", "clone", url, dest).
        cwd: Working directory for the command.
        check: If True (default), raise CalledProcessError on non-zero exit.

    Returns:
        CompletedProcess with returncode for checking success.
    """
    return subprocess.run(args, cwd=cwd, check=check)


def capture(*args: str, cwd: Path | None = None, check: bool = True) -> bytes:
    """Run a command and return its stdout.

    Unlike run(), stdout is buffered and returned; stderr still goes to
    the terminal so diagnostics from the tool stay visible.

    Returns:
        Raw stdout bytes.
    """
    result = subprocess.run(args, cwd=cwd, check=check, stdout=subprocess.PIPE)
    return result.stdout


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Headers go to stderr so that stdout carries only the report.
    """
    click.echo(f"\n{'─' * 60}\n{msg}\n{'─' * 60}", err=True)


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the pipeline.
    """
    click.echo(f"ERROR: {msg}", err=True)
    sys.exit(1)
