"""Human-readable output of the dependency report."""

from __future__ import annotations

from collections.abc import Sequence

import click

from .models import DependencyRecord, ModuleIdentity

UP_TO_DATE = "All dependencies are up to date."


def render(identity: ModuleIdentity, records: Sequence[DependencyRecord]) -> None:
    """Print the module identity followed by the updatable dependencies."""
    click.echo(f"Module: {identity.name}")
    click.echo(f"Go Module Version: {identity.toolchain_version}")
    if not records:
        click.echo(UP_TO_DATE)
        return

    click.echo("Dependencies that can be updated:")
    for record in records:
        # report() already filters these out
        if record.update is None:
            continue
        click.echo(
            f"- {record.import_path}: {record.current_version}"
            f" -> {record.update.new_version}"
        )
