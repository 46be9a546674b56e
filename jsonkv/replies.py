"""Decoding of raw store replies into results or errors.

Replies arrive as whatever the transport produced: ``str`` or ``bytes``
bulk strings, ``int``, ``None`` for nil, or a ``ResponseError`` instance
when errors are collected rather than raised (pipelines).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from valkey.exceptions import ResponseError

from .codec import JSONCodec
from .commands import JSONCommand
from .errors import CommandRejectedError, TransportError
from .path import ROOT_TOKEN
from .types import TypeTag, resolve_type

_OK = "OK"


class _KeyMissing:
    """Sentinel for a nil reply at the key level."""

    def __repr__(self) -> str:
        return "KEY_MISSING"


KEY_MISSING: _KeyMissing = _KeyMissing()


def _text(command: JSONCommand, reply: Any) -> str:
    if isinstance(reply, bytes):
        try:
            return reply.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TransportError(f"{command.name} reply is not valid UTF-8") from exc
    if isinstance(reply, str):
        return reply
    raise TransportError(f"Unexpected {command.name} reply: {reply!r}")


def _raise_if_error(command: JSONCommand, reply: Any) -> None:
    if isinstance(reply, ResponseError):
        raise CommandRejectedError(command.name, str(reply))


def interpret_set(command: JSONCommand, reply: Any) -> None:
    _raise_if_error(command, reply)
    if reply is None:
        # Unmet NX/XX conditions are answered with nil, not an error reply.
        key, path = command.args[0], command.args[1]
        if len(command.args) > 3:
            message = f"{command.args[3]} condition not met for path {path!r} of key {key!r}"
        else:
            message = f"set refused for path {path!r} of key {key!r}"
        raise CommandRejectedError(command.name, message)
    if reply is True or _text(command, reply) == _OK:
        return None
    raise TransportError(f"Unexpected {command.name} reply: {reply!r}")


def interpret_get(
    command: JSONCommand,
    reply: Any,
    codec: JSONCodec,
) -> Union[Any, Dict[str, Any], _KeyMissing]:
    """Decode a ``JSON.GET`` reply.

    A single path yields the decoded value. Several paths yield a dict
    keyed by each requested path's wire form. A nil reply means the key
    is absent and yields :data:`KEY_MISSING`.
    """
    _raise_if_error(command, reply)
    if reply is None:
        return KEY_MISSING

    text = _text(command, reply)
    try:
        decoded = codec.decode(text)
    except ValueError as exc:
        raise TransportError(f"{command.name} reply is not valid JSON: {text!r}") from exc

    requested = command.args[1:]
    if len(requested) <= 1:
        return decoded
    if not isinstance(decoded, dict):
        raise TransportError(
            f"{command.name} with {len(requested)} paths expected an object, "
            f"got {type(decoded).__name__}"
        )
    return {path: decoded.get(path) for path in requested}


def interpret_delete(command: JSONCommand, reply: Any) -> int:
    _raise_if_error(command, reply)
    if isinstance(reply, int) and not isinstance(reply, bool):
        return reply
    raise TransportError(f"Unexpected {command.name} reply: {reply!r}")


def interpret_type(command: JSONCommand, reply: Any) -> Optional[TypeTag]:
    """Return the tag at the path, or ``None`` when the key is absent.

    The store answers nil both for a missing key and for a path that does
    not resolve. Nil at the root means the key is absent; nil at any other
    path is reported as a rejection of that path.
    """
    _raise_if_error(command, reply)
    if reply is None:
        key, path = command.args[0], command.args[1]
        if path == ROOT_TOKEN:
            return None
        raise CommandRejectedError(
            command.name,
            f"Path {path!r} does not exist in key {key!r}",
        )
    # RESP3 connections wrap the name in a one-element list.
    if isinstance(reply, list) and len(reply) == 1:
        reply = reply[0]
    return resolve_type(_text(command, reply))
