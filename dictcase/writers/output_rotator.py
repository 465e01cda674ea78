"""
Numbered output files with line-bounded rotation.

Drives the case filter over a sequence of text blocks and spreads the
result across files named <base><N><ext>, opening the next file each
time the filter reports a rotation point.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, TextIO

from ..constants import DEFAULT_ENCODING, DEFAULT_OUTPUT_EXTENSION
from ..errors import AbortedProcessingError, InputReadFailureError
from ..filters.case_filter import CaseFilter

logger = logging.getLogger(__name__)


class RotatorState(Enum):
    """Lifecycle of a single rotator run."""

    IDLE = "idle"
    OPEN_FILE = "open_file"
    WRITING = "writing"
    ROTATE_AND_REOPEN = "rotate_and_reopen"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"


class OutputRotator:
    """
    Writes filtered text into a sequence of numbered output files.

    Owns the one output file that may be open at a time and its line
    counter. Files are created lazily, only when there is text to write.
    If the run fails mid-stream, the file in progress is deleted; files
    completed earlier stay on disk.
    """

    def __init__(
        self,
        case_filter: CaseFilter,
        output_base: str | Path,
        extension: str = DEFAULT_OUTPUT_EXTENSION,
        encoding: str = DEFAULT_ENCODING
    ):
        """
        Initialize the rotator.

        Args:
            case_filter: Filter applied to every buffer.
            output_base: Path prefix of the output files.
            extension: Suffix appended after the sequence number.
            encoding: Text encoding of the output files.
        """
        self.case_filter = case_filter
        self.output_base = str(output_base)
        self.extension = extension
        self.encoding = encoding

        self.state = RotatorState.IDLE
        self.files: list[Path] = []
        self.lines_total = 0
        self.words_replaced = 0
        self.blocks_read = 0
        self.chars_read = 0

        self._handle: Optional[TextIO] = None
        self._current_path: Optional[Path] = None
        self._lines = 0

    def output_path(self, number: int) -> Path:
        """Path of the output file with the given sequence number."""
        return Path(f"{self.output_base}{number}{self.extension}")

    def write(self, blocks: Iterable[str]) -> list[Path]:
        """
        Filter all blocks into numbered output files.

        Args:
            blocks: Text blocks in input order.

        Returns:
            Paths of the completed output files, in sequence order.

        Raises:
            AbortedProcessingError: Reading or writing failed mid-stream.
        """
        if self.state is not RotatorState.IDLE:
            raise RuntimeError("OutputRotator.write() can only be called once")

        remainder = ""
        try:
            for block in blocks:
                self.blocks_read += 1
                self.chars_read += len(block)
                remainder, rotated = self._consume(remainder + block)
                # A block may hold several cut points; drain them before reading on
                while rotated:
                    remainder, rotated = self._consume(remainder)

            # Input exhausted: flush whatever is still held back
            while remainder:
                remainder, _ = self._consume(remainder, final=True)

            self._close()

        except (InputReadFailureError, OSError, UnicodeError) as e:
            self._abort()
            raise AbortedProcessingError(f"Processing aborted: {e}") from e
        except BaseException:
            self._abort()
            raise

        self.state = RotatorState.EXHAUSTED
        return list(self.files)

    def _consume(self, buffer: str, final: bool = False) -> tuple[str, bool]:
        """Run the filter over one buffer; return the new remainder and whether it rotated."""
        result = self.case_filter.transform(buffer, self._lines, final=final)

        if result.text:
            self._open()
            self._handle.write(result.text)
            self.state = RotatorState.WRITING

        self.lines_total += result.lines_written - self._lines
        self._lines = result.lines_written
        self.words_replaced += result.words_replaced

        if result.rotate:
            self._close()
            self.state = RotatorState.ROTATE_AND_REOPEN

        return result.remainder, result.rotate

    def _open(self) -> None:
        """Open the next numbered file unless one is already open."""
        if self._handle is not None:
            return

        path = self.output_path(len(self.files) + 1)
        path.parent.mkdir(parents=True, exist_ok=True)

        self.state = RotatorState.OPEN_FILE
        self._handle = open(path, "w", encoding=self.encoding, newline="")
        self._current_path = path
        self._lines = 0
        logger.info(f"Opened output file: {path}")

    def _close(self) -> None:
        """Close the current file and record it as complete."""
        if self._handle is None:
            return

        self._handle.close()
        self.files.append(self._current_path)
        logger.info(f"Closed output file: {self._current_path} ({self._lines} lines)")

        self._handle = None
        self._current_path = None
        self._lines = 0

    def _abort(self) -> None:
        """Close and delete the file in progress."""
        self.state = RotatorState.ABORTED

        if self._handle is None:
            return

        path = self._current_path
        try:
            self._handle.close()
        finally:
            self._handle = None
            self._current_path = None
            self._lines = 0
            path.unlink(missing_ok=True)
            logger.error(f"Removed incomplete output file: {path}")
