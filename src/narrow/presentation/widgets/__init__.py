"""
Textual widgets for narrowing sessions.
"""

from .candidate_list import CandidateList

__all__ = ["CandidateList"]
