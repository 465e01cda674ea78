"""Text filtering modules."""

from .case_filter import CaseFilter, FilterResult, WORD_PATTERN

__all__ = [
    "CaseFilter",
    "FilterResult",
    "WORD_PATTERN"
]
