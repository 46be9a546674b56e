"""Shared fixtures: an in-memory stand-in for a store with JSON commands."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

import pytest
from valkey.exceptions import ResponseError

from jsonkv import JSONClient, PathExpression

_MISSING = object()

_TYPE_NAMES = (
    (bool, "boolean"),
    (int, "integer"),
    (float, "number"),
    (str, "string"),
    (list, "array"),
    (dict, "object"),
)


class FakeJSONStore:
    """Implements JSON.SET/GET/DEL/TYPE over legacy paths, in memory.

    Errors are raised as ``ResponseError``. Unmet NX/XX conditions and
    unresolved JSON.TYPE paths answer nil, as the real store does.
    """

    def __init__(self) -> None:
        self.documents: Dict[str, Any] = {}
        self.commands: List[Tuple[Any, ...]] = []

    def exists(self, key: str) -> bool:
        return key in self.documents

    def execute_command(self, *args: Any, **options: Any) -> Any:
        self.commands.append(args)
        name, rest = args[0], args[1:]
        handler = {
            "JSON.SET": self._set,
            "JSON.GET": self._get,
            "JSON.DEL": self._delete,
            "JSON.TYPE": self._type,
        }.get(name)
        if handler is None:
            raise ResponseError(f"ERR unknown command '{name}'")
        return handler(*rest)

    # ------------------------------------------------------------------ #
    # Path helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _child(node: Any, segment: Any) -> Any:
        if isinstance(segment, str) and isinstance(node, dict):
            return node.get(segment, _MISSING)
        if isinstance(segment, int) and isinstance(node, list):
            if -len(node) <= segment < len(node):
                return node[segment]
        return _MISSING

    def _resolve(self, document: Any, segments: Tuple[Any, ...]) -> Any:
        node = document
        for segment in segments:
            node = self._child(node, segment)
            if node is _MISSING:
                break
        return node

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def _set(self, key: str, path: str, raw: str, flag: Optional[str] = None) -> Any:
        try:
            value = json.loads(raw)
        except ValueError:
            raise ResponseError("ERR invalid JSON value") from None
        segments = PathExpression(path).segments

        if not segments:
            exists = key in self.documents
            if (flag == "NX" and exists) or (flag == "XX" and not exists):
                return None
            self.documents[key] = value
            return "OK"

        if key not in self.documents:
            raise ResponseError("ERR new objects must be created at the root")

        parent = self._resolve(self.documents[key], segments[:-1])
        if parent is _MISSING:
            raise ResponseError(f"ERR Path '{path}' does not exist")
        last = segments[-1]
        exists = self._child(parent, last) is not _MISSING
        if (flag == "NX" and exists) or (flag == "XX" and not exists):
            return None
        if isinstance(last, str) and isinstance(parent, dict):
            parent[last] = value
        elif isinstance(last, int) and isinstance(parent, list) and exists:
            parent[last] = value
        else:
            raise ResponseError(f"ERR Path '{path}' does not exist")
        return "OK"

    def _get(self, key: str, *paths: str) -> Optional[str]:
        if key not in self.documents:
            return None
        values = {}
        for path in paths:
            value = self._resolve(self.documents[key], PathExpression(path).segments)
            if value is _MISSING:
                raise ResponseError(f"ERR Path '{path}' does not exist")
            values[path] = value
        if len(paths) == 1:
            return json.dumps(values[paths[0]])
        return json.dumps(values)

    def _delete(self, key: str, path: str = ".") -> int:
        if key not in self.documents:
            return 0
        segments = PathExpression(path).segments
        if not segments:
            del self.documents[key]
            return 1
        parent = self._resolve(self.documents[key], segments[:-1])
        last = segments[-1]
        if parent is _MISSING or self._child(parent, last) is _MISSING:
            return 0
        del parent[last]
        return 1

    def _type(self, key: str, path: str = ".") -> Optional[str]:
        if key not in self.documents:
            return None
        value = self._resolve(self.documents[key], PathExpression(path).segments)
        if value is _MISSING:
            return None
        if value is None:
            return "null"
        for kind, name in _TYPE_NAMES:
            if isinstance(value, kind):
                return name
        raise AssertionError(f"unexpected value in fake store: {value!r}")


@pytest.fixture
def store() -> FakeJSONStore:
    return FakeJSONStore()


@pytest.fixture
def json_client(store: FakeJSONStore) -> JSONClient:
    return JSONClient(store)
