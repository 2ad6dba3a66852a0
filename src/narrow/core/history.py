"""In-memory input history."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from narrow.logger import get_logger

logger = get_logger("history")


class InMemoryHistory:
    """History store keeping the most recent value first.

    Re-recording a value moves it to the front instead of duplicating it.
    """

    def __init__(self, values: Iterable[str] = (), max_length: Optional[int] = None) -> None:
        if max_length is not None and max_length < 1:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self.max_length = max_length
        self._entries: list[str] = []
        # Oldest first so the last given value ends up most recent
        for value in values:
            self.append(value)

    def append(self, value: str) -> None:
        if not value:
            return
        if value in self._entries:
            self._entries.remove(value)
        self._entries.insert(0, value)
        if self.max_length is not None:
            del self._entries[self.max_length :]
        logger.debug(f"History recorded {value!r} ({len(self._entries)} entries)")

    def entries(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
