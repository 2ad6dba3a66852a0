"""
Textual application for interactive narrowing.
"""

from .app import NarrowApp

__all__ = ["NarrowApp"]
