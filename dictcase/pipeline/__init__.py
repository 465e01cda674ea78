"""Pipeline orchestration."""

from .orchestrator import ProcessingStats, TextHandler

__all__ = [
    "ProcessingStats",
    "TextHandler"
]
