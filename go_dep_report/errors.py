"""Exception types raised by the report pipeline.

Every failure is fatal: library code raises one of these, and only the CLI
turns it into a diagnostic and a non-zero exit.
"""

from __future__ import annotations


class GoDepReportError(Exception):
    """Base class for all go-dep-report failures."""


class ConfigError(GoDepReportError):
    """The configuration file is unreadable or invalid."""


class WorkspaceError(GoDepReportError):
    """The temporary workspace could not be created or removed."""


class FetchError(GoDepReportError):
    """Cloning the repository failed."""


class ManifestNotFoundError(GoDepReportError):
    """No go.mod exists anywhere in the checkout."""


class WalkError(GoDepReportError):
    """Walking the checkout failed (e.g. permission denied)."""


class MissingModuleDeclarationError(GoDepReportError):
    """The manifest parsed but has no module statement."""


class ManifestParseError(GoDepReportError, ValueError):
    """The manifest is syntactically invalid."""


class ToolNotFoundError(GoDepReportError):
    """The go command is not on PATH."""


class ListingError(GoDepReportError):
    """`go list` exited non-zero or could not be started."""


class DecodeError(GoDepReportError):
    """The `go list` output is not a valid stream of module records."""
