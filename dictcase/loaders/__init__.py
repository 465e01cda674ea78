"""Input loading modules."""

from .block_source import BlockSource
from .dictionary_loader import load_dictionary

__all__ = [
    "BlockSource",
    "load_dictionary"
]
