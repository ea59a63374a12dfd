"""go.mod reading and parsing.

Implements the go.mod line grammar: one directive per line, `//` comments,
bare or quoted tokens, and parenthesised blocks of the form

    require (
        example.com/a v1.0.0
        example.com/b v1.2.0 // indirect
    )

Only module, go, toolchain and require are kept; every other directive is
syntax-checked and discarded.
"""

from __future__ import annotations

import re
from pathlib import Path

from .errors import ManifestParseError, MissingModuleDeclarationError
from .models import ModFile, ModuleIdentity, Requirement

UNKNOWN_VERSION = "unknown"

# Directives that may open a `verb (` block
_BLOCK_VERBS = frozenset(
    {"require", "exclude", "replace", "retract", "tool", "ignore", "godebug"}
)
_VERBS = _BLOCK_VERBS | {"module", "go", "toolchain"}

_GO_VERSION_RE = re.compile(
    r"^([1-9][0-9]*)\.(0|[1-9][0-9]*)(\.(0|[1-9][0-9]*))?([a-z]+[0-9]+)?$"
)

_TOOLCHAIN_RE = re.compile(r"^default$|^go1($|\.)")

_PUNCT = "(),"


def _tokenize(line: str, filename: str, lineno: int) -> tuple[list[str], str]:
    """Split one line into tokens and its trailing comment.

    Quoted strings ("..." or `...`) are returned unquoted. Parentheses and
    commas are returned as single-character tokens.
    """
    tokens: list[str] = []
    i, n = 0, len(line)
    while i < n:
        c = line[i]
        if c.isspace():
            i += 1
        elif line.startswith("//", i):
            return tokens, line[i + 2 :].strip()
        elif c in _PUNCT:
            tokens.append(c)
            i += 1
        elif c == '"':
            buf: list[str] = []
            i += 1
            while i < n and line[i] != '"':
                if line[i] == "\\" and i + 1 < n:
                    i += 1
                buf.append(line[i])
                i += 1
            if i >= n:
                raise ManifestParseError(
                    f"{filename}:{lineno}: unterminated quoted string"
                )
            tokens.append("".join(buf))
            i += 1
        elif c == "`":
            end = line.find("`", i + 1)
            if end < 0:
                raise ManifestParseError(
                    f"{filename}:{lineno}: unterminated raw string"
                )
            tokens.append(line[i + 1 : end])
            i = end + 1
        else:
            start = i
            while (
                i < n
                and not line[i].isspace()
                and line[i] not in _PUNCT + '"`'
                and not line.startswith("//", i)
            ):
                i += 1
            tokens.append(line[start:i])
    return tokens, ""


def _is_indirect(comment: str) -> bool:
    return comment == "indirect" or comment.startswith("indirect;")


class _Parser:
    """Applies directives to a ModFile, one line at a time."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.mod = ModFile()
        self.lineno = 0

    def error(self, msg: str) -> ManifestParseError:
        return ManifestParseError(f"{self.filename}:{self.lineno}: {msg}")

    def directive(self, verb: str, args: list[str], comment: str) -> None:
        if verb not in _VERBS:
            raise self.error(f"unknown directive: {verb}")
        if "(" in args or ")" in args:
            raise self.error(f"unexpected parenthesis in {verb} statement")
        getattr(self, f"_{verb}")(args, comment)

    def _module(self, args: list[str], comment: str) -> None:
        if self.mod.module is not None:
            raise self.error("repeated module statement")
        if len(args) != 1 or not args[0]:
            raise self.error("usage: module module/path")
        self.mod.module = args[0]

    def _go(self, args: list[str], comment: str) -> None:
        if self.mod.go is not None:
            raise self.error("repeated go statement")
        if len(args) != 1:
            raise self.error("go directive expects exactly one argument")
        if not _GO_VERSION_RE.match(args[0]):
            raise self.error(
                f'invalid go version "{args[0]}": must match format 1.23.0'
            )
        self.mod.go = args[0]

    def _toolchain(self, args: list[str], comment: str) -> None:
        if self.mod.toolchain is not None:
            raise self.error("repeated toolchain statement")
        if len(args) != 1:
            raise self.error("toolchain directive expects exactly one argument")
        if not _TOOLCHAIN_RE.match(args[0]):
            raise self.error(
                f'invalid toolchain version "{args[0]}":'
                " must match format go1.23.0 or default"
            )
        self.mod.toolchain = args[0]

    def _require(self, args: list[str], comment: str) -> None:
        if len(args) != 2:
            raise self.error("usage: require module/path v1.2.3")
        self.mod.requires.append(
            Requirement(path=args[0], version=args[1], indirect=_is_indirect(comment))
        )

    def _exclude(self, args: list[str], comment: str) -> None:
        if len(args) != 2:
            raise self.error("usage: exclude module/path v1.2.3")

    def _replace(self, args: list[str], comment: str) -> None:
        if "=>" not in args:
            raise self.error("usage: replace module/path [v1.2.3] => other/module v1.4")
        arrow = args.index("=>")
        old, new = args[:arrow], args[arrow + 1 :]
        if len(old) not in (1, 2) or len(new) not in (1, 2):
            raise self.error("usage: replace module/path [v1.2.3] => other/module v1.4")

    def _retract(self, args: list[str], comment: str) -> None:
        if not args:
            raise self.error("usage: retract version or retract [low, high]")

    def _godebug(self, args: list[str], comment: str) -> None:
        if len(args) != 1 or "=" not in args[0]:
            raise self.error("usage: godebug key=value")

    def _tool(self, args: list[str], comment: str) -> None:
        if len(args) != 1:
            raise self.error("usage: tool module/path/cmd")

    def _ignore(self, args: list[str], comment: str) -> None:
        if len(args) != 1:
            raise self.error("usage: ignore ./dir")


def parse_modfile(text: str, filename: str = "go.mod") -> ModFile:
    """Parse go.mod text with LF line endings.

    Raises:
        ManifestParseError: On any syntax error. The message is prefixed
            with "filename:line:".
    """
    parser = _Parser(filename)
    block_verb: str | None = None
    block_start = 0

    for lineno, line in enumerate(text.split("\n"), start=1):
        parser.lineno = lineno
        tokens, comment = _tokenize(line, filename, lineno)
        if not tokens:
            continue

        if block_verb is not None:
            if tokens == [")"]:
                block_verb = None
                continue
            parser.directive(block_verb, tokens, comment)
            continue

        verb, args = tokens[0], tokens[1:]
        if verb in ("(", ")", ","):
            raise parser.error(f"unexpected {verb!r}")
        if args == ["("]:
            if verb not in _BLOCK_VERBS:
                raise parser.error(f"{verb} does not accept a block")
            block_verb, block_start = verb, lineno
            continue
        parser.directive(verb, args, comment)

    if block_verb is not None:
        parser.lineno = block_start
        raise parser.error(f"unterminated {block_verb} block")

    return parser.mod


def parse(manifest_path: Path) -> ModuleIdentity:
    """Read a go.mod file and return the module it declares.

    CRLF line endings are normalised to LF before parsing, so a manifest
    checked out on Windows parses the same as its LF original.

    Raises:
        ManifestParseError: If the file is unreadable or malformed.
        MissingModuleDeclarationError: If there is no module statement.
    """
    try:
        text = manifest_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(f"error reading {manifest_path}: {exc}") from exc
    text = text.replace("\r\n", "\n")

    mod = parse_modfile(text, str(manifest_path))
    if mod.module is None:
        raise MissingModuleDeclarationError("module declaration not found")

    return ModuleIdentity(
        name=mod.module,
        toolchain_version=mod.go if mod.go is not None else UNKNOWN_VERSION,
    )
