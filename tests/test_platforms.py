"""Tests for go_dep_report.platforms."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import patch

from go_dep_report.platforms import POSIX, WINDOWS, detect_platform


def test_posix_clone_command() -> None:
    assert POSIX.clone_command("git", "https://x/y.git", "/tmp/ws") == [
        "git",
        "clone",
        "https://x/y.git",
        "/tmp/ws",
    ]


def test_windows_clone_goes_through_cmd() -> None:
    assert WINDOWS.clone_command("git", "https://x/y.git", r"C:\t\ws") == [
        "cmd",
        "/C",
        "git",
        "clone",
        "https://x/y.git",
        r"C:\t\ws",
    ]


def test_windows_removal_policy() -> None:
    assert WINDOWS.shared_workspace
    assert WINDOWS.removal_attempts == 3
    assert WINDOWS.removal_delay == 0.2


def test_posix_removal_policy() -> None:
    assert not POSIX.shared_workspace
    assert POSIX.removal_attempts == 1


def test_detect_windows() -> None:
    with patch("go_dep_report.platforms.os", SimpleNamespace(name="nt")):
        assert detect_platform() is WINDOWS


def test_detect_posix() -> None:
    with patch("go_dep_report.platforms.os", SimpleNamespace(name="posix")):
        assert detect_platform() is POSIX
