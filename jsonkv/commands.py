"""Argument lists for the JSON commands.

Nothing here touches the network: each builder returns a
:class:`JSONCommand` that a transport can send with
``execute_command(*command.wire())``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .modifiers import ExistenceModifier
from .path import ROOT_PATH, PathExpression

JSON_SET = "JSON.SET"
JSON_GET = "JSON.GET"
JSON_DEL = "JSON.DEL"
JSON_TYPE = "JSON.TYPE"


@dataclass(frozen=True)
class JSONCommand:
    name: str
    args: Tuple[str, ...]

    def wire(self) -> Tuple[str, ...]:
        return (self.name, *self.args)


def build_set(
    key: str,
    path: PathExpression,
    serialized_value: str,
    modifier: ExistenceModifier = ExistenceModifier.UNCONDITIONAL,
) -> JSONCommand:
    """``JSON.SET key path value [NX|XX]``.

    A non-root set on a key that does not exist yet is still sent; the
    store rejects it.
    """
    args = [key, path.wire_form, serialized_value]
    if modifier.flag is not None:
        args.append(modifier.flag)
    return JSONCommand(JSON_SET, tuple(args))


def build_get(key: str, paths: Iterable[PathExpression] = ()) -> JSONCommand:
    """``JSON.GET key [path ...]``; no paths means the root."""
    wire_paths = tuple(path.wire_form for path in paths) or (ROOT_PATH.wire_form,)
    return JSONCommand(JSON_GET, (key, *wire_paths))


def build_delete(key: str, path: Optional[PathExpression] = None) -> JSONCommand:
    return JSONCommand(JSON_DEL, (key, (path or ROOT_PATH).wire_form))


def build_type(key: str, path: Optional[PathExpression] = None) -> JSONCommand:
    return JSONCommand(JSON_TYPE, (key, (path or ROOT_PATH).wire_form))
