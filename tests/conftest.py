"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from go_dep_report.models import DependencyRecord


@pytest.fixture
def gomod_text() -> str:
    """A realistic go.mod with blocks, comments and indirect requirements."""
    return """\
// Example service.
module example.com/service

go 1.21

toolchain go1.21.5

require (
\tgithub.com/spf13/cobra v1.7.0
\tgolang.org/x/mod v0.12.0 // indirect
)

require example.com/bar v1.0.0

replace example.com/bar => ../bar

exclude example.com/old v0.1.0
"""


@pytest.fixture
def write_gomod(tmp_path: Path):
    """Write go.mod content under tmp_path and return its path."""

    def _write(content: str | bytes, subdir: str = "") -> Path:
        directory = tmp_path / subdir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "go.mod"
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    return _write


@pytest.fixture
def bar_update() -> DependencyRecord:
    """A dependency with an available update."""
    return DependencyRecord.model_validate(
        {
            "Path": "example.com/bar",
            "Version": "v1.0.0",
            "Update": {"Path": "example.com/bar", "Version": "v1.2.0"},
        }
    )
