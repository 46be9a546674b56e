"""JSON text encoding for values sent to and read from the store."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from pydantic import BaseModel


class JSONCodec:
    """Encode application values to JSON text and decode replies back.

    Besides plain JSON-compatible values, pydantic models and dataclass
    instances are accepted on encode. Decoding always yields plain
    ``dict``/``list``/scalar values.
    """

    def encode(self, value: Any) -> str:
        return json.dumps(
            self._to_plain(value),
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def decode(self, text: str) -> Any:
        return json.loads(text)

    @staticmethod
    def _to_plain(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json")
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return dataclasses.asdict(value)
        return value
