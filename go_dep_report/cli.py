"""CLI entry point for go-dep-report."""

from __future__ import annotations

from pathlib import Path

import click

from .config import load_settings
from .errors import GoDepReportError
from .pipeline import run_report
from .platforms import detect_platform
from .shell import fatal

USAGE = "Usage: go-dep-report <git-repo-url>"


@click.command()
@click.version_option(package_name="go-dep-report")
@click.argument("repo_url", required=False)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [tool.go-dep-report] table.",
)
def cli(repo_url: str | None, config_path: Path | None) -> None:
    """Clone a Go repository and report dependencies with newer versions."""
    if repo_url is None:
        click.echo(USAGE)
        raise SystemExit(1)

    try:
        settings = load_settings(config_path)
        run_report(repo_url, settings, detect_platform())
    except GoDepReportError as exc:
        fatal(str(exc))
