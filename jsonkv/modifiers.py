"""Existence conditions for ``JSON.SET``."""

from __future__ import annotations

import enum
from typing import Optional


class ExistenceModifier(enum.Enum):
    """Whether a set may create a location, must update one, or either.

    The store checks the condition atomically; the client never looks
    ahead.
    """

    UNCONDITIONAL = "unconditional"
    MUST_EXIST = "must_exist"
    MUST_NOT_EXIST = "must_not_exist"

    @property
    def flag(self) -> Optional[str]:
        """Wire token appended to ``JSON.SET``, or ``None`` for no flag."""
        return _FLAGS[self]


_FLAGS = {
    ExistenceModifier.UNCONDITIONAL: None,
    ExistenceModifier.MUST_EXIST: "XX",
    ExistenceModifier.MUST_NOT_EXIST: "NX",
}
