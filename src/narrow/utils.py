"""
Utility functions for the narrow engine.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/narrow).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def clamp(value: int, low: int, high: int) -> int:
    """
    Clamp ``value`` into ``[low, high]``.

    When ``high < low`` the lower bound wins, which is what windowing code
    wants for lists shorter than a page.
    """
    return max(low, min(value, high))
