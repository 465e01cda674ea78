"""
Block-wise text input.

Streams a text file as fixed-size decoded chunks so that large
documents never have to be held in memory at once.
"""

import logging
from pathlib import Path
from typing import Iterator

from ..constants import DEFAULT_BLOCK_SIZE, DEFAULT_ENCODING, MAX_FILE_SIZE
from ..errors import ConfigurationError, InputReadFailureError, InputTooLargeError

logger = logging.getLogger(__name__)


class BlockSource:
    """
    Single-pass source of text blocks read from a file.

    The size ceiling is checked once, when the source is created, so an
    oversized file is rejected before any block is produced. Blocks are
    decoded with newline translation disabled: every character of the
    file, including carriage returns, reaches the consumer unchanged.
    """

    def __init__(
        self,
        path: str | Path,
        block_size: int = DEFAULT_BLOCK_SIZE,
        max_size: int = MAX_FILE_SIZE,
        encoding: str = DEFAULT_ENCODING
    ):
        """
        Validate the input file.

        Args:
            path: Path to the text file.
            block_size: Number of characters per block.
            max_size: Largest accepted file size in bytes.
            encoding: Text encoding of the file.

        Raises:
            ConfigurationError: The path is not a file or block_size is invalid.
            InputTooLargeError: The file is larger than max_size.
        """
        if block_size <= 0:
            raise ConfigurationError(f"Block size must be positive, got {block_size}")

        self.path = Path(path)
        self.block_size = block_size
        self.encoding = encoding

        if not self.path.is_file():
            raise ConfigurationError(f"Input file not found: {self.path}")

        self.size = self.path.stat().st_size
        if self.size > max_size:
            raise InputTooLargeError(
                f"Input file {self.path} is {self.size} bytes, "
                f"larger than the {max_size} byte limit"
            )

        self._started = False

    def __iter__(self) -> Iterator[str]:
        if self._started:
            raise RuntimeError(f"Block source for {self.path} was already consumed")
        self._started = True
        return self._read_blocks()

    def _read_blocks(self) -> Iterator[str]:
        """Yield blocks until end-of-file; wrap read errors."""
        try:
            with open(self.path, "r", encoding=self.encoding, newline="") as f:
                index = 0
                while True:
                    block = f.read(self.block_size)
                    if not block:
                        logger.debug(f"End of input after {index} blocks: {self.path}")
                        return
                    logger.debug(f"Block {index}: {len(block)} characters")
                    index += 1
                    yield block
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadFailureError(
                f"Text for processing is unavailable ({self.path}): {e}"
            ) from e
