"""Validated JSON path expressions in the store's dotted/indexed syntax."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Tuple, Union

from .errors import InvalidPathError

ROOT_TOKEN = "."

PathSegment = Union[str, int]

_NAME_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_INDEX_RE = re.compile(r"\[(-?\d+)\]")


def _parse_quoted(text: str, start: int) -> Tuple[str, int]:
    """Parse ``["..."]`` or ``['...']`` starting at ``text[start] == '['``.

    Returns the unescaped member name and the index just past ``]``.
    """
    quote = text[start + 1]
    chars = []
    pos = start + 2
    while pos < len(text):
        char = text[pos]
        if char == "\\":
            if pos + 1 >= len(text):
                break
            chars.append(text[pos + 1])
            pos += 2
            continue
        if char == quote:
            if pos + 1 >= len(text) or text[pos + 1] != "]":
                raise InvalidPathError(text, f"expected ']' after quoted name at {pos + 1}")
            return "".join(chars), pos + 2
        chars.append(char)
        pos += 1
    raise InvalidPathError(text, f"unterminated quoted name starting at {start}")


def parse_segments(text: str) -> Tuple[PathSegment, ...]:
    """Split a non-root path into member names and array indexes."""
    if not text:
        raise InvalidPathError(text, "path must not be empty")
    if text.startswith("$"):
        raise InvalidPathError(text, "JSONPath ($) syntax is not supported")

    segments = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "[":
            if pos + 1 < len(text) and text[pos + 1] in "\"'":
                name, pos = _parse_quoted(text, pos)
                segments.append(name)
                continue
            match = _INDEX_RE.match(text, pos)
            if match is None:
                raise InvalidPathError(text, f"malformed index at {pos}")
            segments.append(int(match.group(1)))
            pos = match.end()
            continue

        if char == ".":
            pos += 1
        elif pos != 0:
            raise InvalidPathError(text, f"unexpected character {char!r} at {pos}")

        match = _NAME_RE.match(text, pos)
        if match is None:
            raise InvalidPathError(text, f"expected member name at {pos}")
        segments.append(match.group(0))
        pos = match.end()

    return tuple(segments)


@dataclass(frozen=True)
class PathExpression:
    """An immutable, validated path.

    Equality and hashing use the wire form only, so ``PathExpression(".a")``
    and ``PathExpression("a")`` are different paths even though the store
    resolves them to the same location.
    """

    wire_form: str
    segments: Tuple[PathSegment, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.wire_form, str):
            raise InvalidPathError(repr(self.wire_form), "path must be a string")
        if self.wire_form == ROOT_TOKEN:
            segments: Tuple[PathSegment, ...] = ()
        else:
            segments = parse_segments(self.wire_form)
        object.__setattr__(self, "segments", segments)

    @classmethod
    def of(cls, path: "PathLike | None") -> "PathExpression":
        """Coerce a string, expression or ``None`` (root) to an expression."""
        if path is None:
            return ROOT_PATH
        if isinstance(path, PathExpression):
            return path
        return cls(path)

    @property
    def is_root(self) -> bool:
        return self.wire_form == ROOT_TOKEN

    def __str__(self) -> str:
        return self.wire_form


ROOT_PATH = PathExpression(ROOT_TOKEN)

PathLike = Union[PathExpression, str]
