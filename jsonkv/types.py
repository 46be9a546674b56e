"""Mapping of store-reported type names to :class:`TypeTag`."""

from __future__ import annotations

import enum

from .errors import UnsupportedTypeError


class TypeTag(enum.Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOATING_POINT = "number"
    BOOLEAN = "boolean"
    NULL = "null"


_BY_NAME = {tag.value: tag for tag in TypeTag}


def resolve_type(type_name: str) -> TypeTag:
    """Return the tag for ``type_name``; unknown names are an error, not null."""
    try:
        return _BY_NAME[type_name]
    except KeyError:
        raise UnsupportedTypeError(type_name) from None
