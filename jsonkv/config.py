"""Store connection settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import JSONKVError


@dataclass(frozen=True)
class StoreConfig:
    """Immutable container for store connection settings."""

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    socket_timeout: Optional[float] = 5.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StoreConfig":
        """Read ``JSONKV_*`` variables, falling back to the defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        try:
            timeout = env.get("JSONKV_SOCKET_TIMEOUT")
            return cls(
                host=env.get("JSONKV_HOST", defaults.host),
                port=int(env.get("JSONKV_PORT", defaults.port)),
                db=int(env.get("JSONKV_DB", defaults.db)),
                password=env.get("JSONKV_PASSWORD") or None,
                socket_timeout=float(timeout) if timeout else defaults.socket_timeout,
            )
        except ValueError as exc:
            raise JSONKVError(f"Invalid store configuration: {exc}") from exc
