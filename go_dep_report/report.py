"""Query `go list` for available module updates.

`go list -m -u -json all` prints one JSON object per module, concatenated
rather than wrapped in an array:

    {"Path": "example.com/bar", "Version": "v1.0.0",
     "Update": {"Path": "example.com/bar", "Version": "v1.2.0"}}
    {"Path": "example.com/baz", "Version": "v0.3.1"}

Only records with an Update that point at an external module are reported.
"""

from __future__ import annotations

import json
import os
import shutil
import subprocess
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from .errors import DecodeError, ListingError, ToolNotFoundError
from .models import DependencyRecord
from .shell import capture

LIST_ARGS = ("list", "-m", "-u", "-json", "all")

_decoder = json.JSONDecoder()


def to_slash(path: str) -> str:
    """Replace the OS path separator with forward slashes."""
    return path.replace(os.sep, "/")


def decode_stream(buffer: str) -> Iterator[DependencyRecord]:
    """Yield one DependencyRecord per JSON object in buffer.

    Objects are decoded lazily, in order, until the buffer is exhausted.
    Whitespace between objects is ignored.

    Raises:
        DecodeError: On malformed JSON or an object that is not a module
            record. Records yielded before the bad object stay yielded.
    """
    pos, end = 0, len(buffer)
    while True:
        while pos < end and buffer[pos].isspace():
            pos += 1
        if pos >= end:
            return
        try:
            value, pos = _decoder.raw_decode(buffer, pos)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"error decoding dependencies: {exc}") from exc
        try:
            yield DependencyRecord.model_validate(value)
        except ValidationError as exc:
            raise DecodeError(f"error decoding dependencies: {exc}") from exc


def is_external(import_path: str, workspace: Path) -> bool:
    """Tell whether import_path names a module outside the checkout.

    Relative ("./x") and absolute ("/x") paths are local, as is any path
    that embeds the workspace directory.
    """
    path = to_slash(import_path)
    root = to_slash(str(workspace))
    return not path.startswith((".", "/")) and root not in path


def report(workspace: Path, *, go: str = "go") -> list[DependencyRecord]:
    """Return the external dependencies of the module in workspace that
    have a newer version available, in `go list` order.

    Raises:
        ToolNotFoundError: If go is not on PATH.
        ListingError: If `go list` fails.
        DecodeError: If its output cannot be decoded.
    """
    if shutil.which(go) is None:
        raise ToolNotFoundError(f"go command not found: {go!r} is not on PATH")

    try:
        out = capture(go, *LIST_ARGS, cwd=workspace)
    except subprocess.CalledProcessError as exc:
        raise ListingError(
            f"error listing dependencies: go list exited with status {exc.returncode}"
        ) from exc
    except OSError as exc:
        raise ListingError(f"error listing dependencies: {exc}") from exc

    try:
        text = out.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"error decoding dependencies: {exc}") from exc

    return [
        record
        for record in decode_stream(text)
        if record.update is not None and is_external(record.import_path, workspace)
    ]
