"""History store protocol."""

from typing import Protocol

__all__ = ["HistoryStore"]


class HistoryStore(Protocol):
    """Protocol for the host's input history.

    The engine only asks the host to record committed values and to list
    what was recorded; where and how long entries live is up to the host.
    """

    def append(self, value: str) -> None:
        """Record a committed value.

        Args:
            value: The resolved value of a commit
        """
        ...

    def entries(self) -> list[str]:
        """Return recorded values, most recent first."""
        ...
