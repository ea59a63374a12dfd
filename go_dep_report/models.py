"""Data models for go-dep-report.

These Pydantic models describe the parsed manifest and the module records
emitted by `go list -m -u -json`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModuleIdentity(BaseModel):
    """The module a repository declares in its go.mod.

    Attributes:
        name: Module path from the `module` statement.
        toolchain_version: Value of the `go` directive, or "unknown".
    """

    model_config = ConfigDict(frozen=True)

    name: str
    toolchain_version: str


class UpdateInfo(BaseModel):
    """A newer version reported for a dependency."""

    model_config = ConfigDict(populate_by_name=True)

    import_path: str = Field(default="", alias="Path")
    new_version: str = Field(default="", alias="Version")


class DependencyRecord(BaseModel):
    """One module entry from the `go list` JSON stream.

    Missing fields decode to empty strings, so the main module (which has
    no Version) still validates.

    Attributes:
        import_path: Module path.
        current_version: Version currently selected by the build list.
        update: Newer version, if `go list -u` found one.
    """

    model_config = ConfigDict(populate_by_name=True)

    import_path: str = Field(default="", alias="Path")
    current_version: str = Field(default="", alias="Version")
    update: UpdateInfo | None = Field(default=None, alias="Update")


class Requirement(BaseModel):
    """A `require` line from go.mod."""

    path: str
    version: str
    indirect: bool = False


class ModFile(BaseModel):
    """Parsed contents of a go.mod file.

    Only the directives go-dep-report cares about are kept; the others are
    syntax-checked and dropped.
    """

    module: str | None = None
    go: str | None = None
    toolchain: str | None = None
    requires: list[Requirement] = Field(default_factory=list)
