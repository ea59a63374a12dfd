"""Report pipeline: clone → locate → parse → list → print.

1. Acquire a temporary workspace
2. Clone the repository into it
3. Find and parse the first go.mod
4. Ask `go list` which dependencies have updates
5. Print the report
6. Remove the workspace, however the run ended

Any failure aborts the run; there are no partial reports.
"""

from __future__ import annotations

from .config import Settings
from .fetch import fetch
from .locate import locate
from .manifest import parse
from .platforms import Platform
from .render import render
from .report import report
from .shell import step
from .workspace import WorkspaceManager


def run_report(repo_url: str, settings: Settings, platform: Platform) -> None:
    """Execute the full report pipeline for repo_url.

    Args:
        repo_url: Anything `git clone` accepts.
        settings: Executables and names to use.
        platform: Platform selected at startup.

    Raises:
        GoDepReportError: Any failure, including failure to remove the
            workspace afterwards.
    """
    manager = WorkspaceManager(platform, prefix=settings.workspace_prefix)
    with manager.workspace() as workspace:
        step(f"Cloning {repo_url}")
        fetch(repo_url, workspace, platform=platform, git=settings.git)

        step(f"Locating {settings.manifest_name}")
        manifest_path = locate(workspace, settings.manifest_name)
        identity = parse(manifest_path)

        step("Checking for dependency updates")
        records = report(workspace, go=settings.go)

        render(identity, records)
