"""Configuration loading.

Settings are optional. When a config file is given, the [tool.go-dep-report]
table is read from it, so the table can live in an existing pyproject.toml:

    [tool.go-dep-report]
    go = "/usr/local/go/bin/go"
    manifest-name = "go.mod"
"""

from __future__ import annotations

from pathlib import Path

import tomlkit
from pydantic import BaseModel, ConfigDict, ValidationError
from tomlkit.exceptions import TOMLKitError

from .errors import ConfigError

TABLE = "go-dep-report"


class Settings(BaseModel):
    """Runtime settings.

    Attributes:
        git: Git executable used to clone.
        go: Go executable used to list modules.
        manifest_name: Manifest filename to search for.
        workspace_prefix: Name (or name prefix) of the temporary workspace.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    git: str = "git"
    go: str = "go"
    manifest_name: str = "go.mod"
    workspace_prefix: str = "go-dep-analysis"


def load_settings(path: Path | None = None) -> Settings:
    """Load Settings from the [tool.go-dep-report] table of a TOML file.

    Keys may be written with hyphens or underscores. Returns the defaults
    when path is None or the table is absent.

    Raises:
        ConfigError: If the file cannot be read or parsed, or the table
            holds unknown keys or values of the wrong type.
    """
    if path is None:
        return Settings()

    try:
        doc = tomlkit.parse(path.read_text())
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except TOMLKitError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    tool = doc.get("tool", {})
    table = tool.get(TABLE, {}) if isinstance(tool, dict) else None
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TABLE}] in {path} must be a table")
    raw = {str(key).replace("-", "_"): value for key, value in table.items()}
    try:
        return Settings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid [tool.{TABLE}] in {path}: {exc}") from exc
