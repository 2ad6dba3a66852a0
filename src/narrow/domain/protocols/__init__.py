"""Domain protocols - interfaces for replaceable components.

Pipeline stages and history stores are described structurally so that
callers can plug in plain functions or their own classes without
inheriting from anything in this package.
"""

from narrow.domain.protocols.history import HistoryStore
from narrow.domain.protocols.pipeline import Highlighter, Preprocessor, Refiner

__all__ = [
    "Preprocessor",
    "Refiner",
    "Highlighter",
    "HistoryStore",
]
