"""Bounded collection of failures and warnings gathered during a run."""

from __future__ import annotations

import logging
from typing import Iterator

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


class ErrorLog:
    """Append-only message list with a fixed capacity.

    Messages past the capacity are dropped. Callers are not told about the
    drop; the run carries on regardless.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._messages: list[str] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def record(self, message: str) -> None:
        logger.debug(message)
        if len(self._messages) < self._capacity:
            self._messages.append(message)

    def is_empty(self) -> bool:
        return not self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)
