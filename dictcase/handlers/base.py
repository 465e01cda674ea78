"""Handler capability shared by all text handlers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional


class Handler(ABC):
    """
    A text handler runnable by the host.

    Implementations are constructed with an optional config file path
    and run with three file paths: the dictionary, the input text and
    the base name of the output files.
    """

    #: Short description shown in handler listings.
    description: str = ""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path

    @abstractmethod
    def run(
        self,
        dictionary_path: str | Path,
        input_path: str | Path,
        output_base: str | Path
    ) -> Any:
        """Process input_path against dictionary_path into output_base files."""
