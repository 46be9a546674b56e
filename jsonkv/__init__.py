"""jsonkv.

Path-addressed JSON documents in a key-value store with JSON commands.
"""

from __future__ import annotations

from .client import JSONClient
from .codec import JSONCodec
from .errors import (
    CommandRejectedError,
    InvalidPathError,
    JSONKVError,
    TransportError,
    UnsupportedTypeError,
)
from .modifiers import ExistenceModifier
from .path import ROOT_PATH, PathExpression
from .types import TypeTag

__all__ = [
    "CommandRejectedError",
    "ExistenceModifier",
    "InvalidPathError",
    "JSONClient",
    "JSONCodec",
    "JSONKVError",
    "PathExpression",
    "ROOT_PATH",
    "TransportError",
    "TypeTag",
    "UnsupportedTypeError",
]
