"""Client for the store's JSON commands."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import valkey
from valkey.exceptions import ResponseError, ValkeyError

from .codec import JSONCodec
from .commands import (
    JSONCommand,
    build_delete,
    build_get,
    build_set,
    build_type,
)
from .config import StoreConfig
from .errors import CommandRejectedError, TransportError
from .modifiers import ExistenceModifier
from .path import PathExpression, PathLike
from .replies import (
    KEY_MISSING,
    interpret_delete,
    interpret_get,
    interpret_set,
    interpret_type,
)
from .types import TypeTag

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything that can send one command and return the raw reply."""

    def execute_command(self, *args: Any, **options: Any) -> Any: ...


class JSONClient:
    """Path-addressed access to JSON documents held in the store.

    Public API:

    * :meth:`set`
    * :meth:`get`
    * :meth:`delete`
    * :meth:`type_of`

    The client holds no state besides its transport and codec.
    """

    def __init__(self, transport: Transport, codec: Optional[JSONCodec] = None) -> None:
        self._transport = transport
        self._codec = codec or JSONCodec()

    # --------------------------------------------------------------------- #
    # Construction helpers
    # --------------------------------------------------------------------- #

    @classmethod
    def from_config(cls, store_config: StoreConfig) -> "JSONClient":
        """Connect to the store described by ``store_config``."""
        connection = valkey.Valkey(
            host=store_config.host,
            port=store_config.port,
            db=store_config.db,
            password=store_config.password,
            socket_timeout=store_config.socket_timeout,
            decode_responses=True,
        )
        return cls(connection)

    # --------------------------------------------------------------------- #
    # Dispatch
    # --------------------------------------------------------------------- #

    def _execute(self, command: JSONCommand) -> Any:
        logger.debug("dispatching %s %s", command.name, " ".join(command.args[:2]))
        try:
            return self._transport.execute_command(*command.wire())
        except ResponseError as exc:
            logger.debug("%s rejected: %s", command.name, exc)
            raise CommandRejectedError(command.name, str(exc)) from exc
        except ValkeyError as exc:
            logger.warning("%s failed in transport: %s", command.name, exc)
            raise TransportError(f"{command.name} failed: {exc}") from exc

    # --------------------------------------------------------------------- #
    # Core operations
    # --------------------------------------------------------------------- #

    def set(
        self,
        key: str,
        value: Any,
        path: Optional[PathLike] = None,
        modifier: ExistenceModifier = ExistenceModifier.UNCONDITIONAL,
    ) -> None:
        """Store ``value`` at ``path`` (root by default).

        New keys can only be created at the root. With ``MUST_EXIST`` or
        ``MUST_NOT_EXIST`` the store decides whether the condition held;
        a failed condition raises :class:`CommandRejectedError`.
        """
        expression = PathExpression.of(path)
        command = build_set(key, expression, self._codec.encode(value), modifier)
        interpret_set(command, self._execute(command))

    def get(self, key: str, *paths: PathLike, default: Any = None) -> Any:
        """Fetch the value at one path, or a mapping for several paths.

        Returns ``default`` when the key does not exist. A path that does
        not resolve inside an existing key raises
        :class:`CommandRejectedError`.
        """
        expressions = [PathExpression.of(path) for path in paths]
        command = build_get(key, expressions)
        result = interpret_get(command, self._execute(command), self._codec)
        if result is KEY_MISSING:
            return default
        return result

    def delete(self, key: str, path: Optional[PathLike] = None) -> int:
        """Remove the value at ``path`` and return how many were removed.

        Deleting the root removes the key. A path that does not resolve
        returns 0.
        """
        command = build_delete(key, PathExpression.of(path))
        return interpret_delete(command, self._execute(command))

    def type_of(self, key: str, path: Optional[PathLike] = None) -> Optional[TypeTag]:
        """Return the JSON type at ``path``, or ``None`` if the key is absent.

        A non-root path that does not resolve raises
        :class:`CommandRejectedError`, including when the key itself is
        absent, since the store answers both cases the same way.
        """
        command = build_type(key, PathExpression.of(path))
        return interpret_type(command, self._execute(command))
