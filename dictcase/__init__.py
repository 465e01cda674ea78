"""
Dictcase

A streaming text pipeline that rewrites dictionary words in upper case
and splits the result across numbered, line-bounded output files that
are only ever cut at the end of a sentence.
"""

__version__ = "0.1.0"
__author__ = "Dictcase Project"

from .pipeline.orchestrator import TextHandler

__all__ = ["TextHandler"]
