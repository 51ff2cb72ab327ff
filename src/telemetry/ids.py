"""Identifier and clock capability consumed by the envelope builder."""

from __future__ import annotations

import time
from typing import Protocol
from uuid import uuid4


class IdentifierSource(Protocol):
    """Provides fresh event identifiers and the current time.

    Implementations must be safe to call from concurrent threads.
    """

    def new_id(self) -> str:
        """Return an identifier never handed out before."""

    def now_ms(self) -> int:
        """Return the current time in epoch milliseconds."""


class SystemIdentifierSource:
    """uuid4 identifiers and the wall clock. Stateless."""

    def new_id(self) -> str:
        return str(uuid4())

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


DEFAULT_IDENTIFIER_SOURCE: IdentifierSource = SystemIdentifierSource()
