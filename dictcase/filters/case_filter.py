"""
Dictionary-driven case filtering.

Rewrites every dictionary word of a text buffer in upper case and
decides where the output may be cut into the next file.
"""

import codecs
import re
from dataclasses import dataclass
from typing import Iterable

from ..constants import DEFAULT_ENCODING, MAX_LINES, SENTENCE_TERMINATORS
from ..errors import ConfigurationError

# Maximal runs of word characters, i.e. text between two word boundaries
WORD_PATTERN = re.compile(r"\w+")


@dataclass
class FilterResult:
    """Result of filtering one buffer."""

    text: str
    remainder: str
    lines_written: int
    rotate: bool
    words_replaced: int = 0


class CaseFilter:
    """
    Upper-cases dictionary words in a stream of text buffers.

    Each call to transform() takes the line count of the current output
    file and returns the updated count together with any unconsumed
    tail, so no state crosses calls except through those values.
    """

    def __init__(
        self,
        dictionary: Iterable[str],
        max_lines: int = MAX_LINES,
        terminators: str = SENTENCE_TERMINATORS,
        encoding: str | None = DEFAULT_ENCODING
    ):
        """
        Initialize the case filter.

        Args:
            dictionary: Words to upper-case (matched case-insensitively).
            max_lines: Maximum number of lines per output file.
            terminators: Characters after which an output file may end.
            encoding: Output encoding. Upper-case forms it cannot represent
                are left in their original case. None disables the check.
        """
        if max_lines < 1:
            raise ConfigurationError(f"max_lines must be at least 1, got {max_lines}")
        if not terminators:
            raise ConfigurationError("At least one sentence terminator is required")
        if encoding is not None:
            try:
                codecs.lookup(encoding)
            except LookupError as e:
                raise ConfigurationError(f"Unknown output encoding: {encoding}") from e

        self.dictionary = frozenset(word.lower() for word in dictionary)
        self.max_lines = max_lines
        self.terminators = frozenset(terminators)
        self.encoding = encoding

    def transform(
        self,
        buffer: str,
        lines_written: int = 0,
        final: bool = False
    ) -> FilterResult:
        """
        Filter one buffer (previous remainder + next block).

        Word spans are located once over the whole buffer, then the buffer
        is walked position by position: a position where a span starts
        emits the whole word, any other character is copied through.

        Unless final is set, a word touching the end of the buffer is held
        back in the remainder, since the next block may continue it.

        Args:
            buffer: Text to filter.
            lines_written: Newlines already written to the current file.
            final: True when no more input will follow this buffer.

        Returns:
            FilterResult. When rotate is True the current output file is
            complete and remainder must be prefixed to the next block.
        """
        spans = [match.span() for match in WORD_PATTERN.finditer(buffer)]

        end = len(buffer)
        if not final and spans and spans[-1][1] == end:
            end = spans.pop()[0]

        output = []
        words_replaced = 0
        next_span = 0
        pos = 0

        while pos < end:
            if next_span < len(spans) and spans[next_span][0] == pos:
                start, stop = spans[next_span]
                word = buffer[start:stop]
                if word.lower() in self.dictionary:
                    output.append(self._upper(word))
                    words_replaced += 1
                else:
                    output.append(word)
                next_span += 1
                pos = stop
                continue

            char = buffer[pos]
            output.append(char)
            pos += 1

            if char == "\n":
                lines_written += 1

            if self._should_rotate(char, lines_written):
                return FilterResult(
                    text="".join(output),
                    remainder=buffer[pos:],
                    lines_written=lines_written,
                    rotate=True,
                    words_replaced=words_replaced
                )

        return FilterResult(
            text="".join(output),
            remainder=buffer[end:],
            lines_written=lines_written,
            rotate=False,
            words_replaced=words_replaced
        )

    def _upper(self, word: str) -> str:
        """
        Upper-case word, keeping characters whose upper-case form the output
        encoding cannot represent (cp1251 has `µ` but not Greek `Μ`).
        """
        upper = word.upper()
        if self.encoding is None or self._encodable(upper):
            return upper
        return "".join(
            char.upper() if self._encodable(char.upper()) else char
            for char in word
        )

    def _encodable(self, text: str) -> bool:
        try:
            text.encode(self.encoding)
        except UnicodeEncodeError:
            return False
        return True

    def _should_rotate(self, char: str, lines_written: int) -> bool:
        """
        Check whether the file may end right after char.

        A sentence terminator ends the file once the counter is one short
        of max_lines. A newline that fills the file ends it regardless.
        """
        if char in self.terminators and lines_written >= self.max_lines - 1:
            return True
        return char == "\n" and lines_written >= self.max_lines

    def transform_text(self, text: str) -> str:
        """Upper-case dictionary words in an in-memory string, without rotation."""

        def replace_match(match):
            word = match.group(0)
            return self._upper(word) if word.lower() in self.dictionary else word

        return WORD_PATTERN.sub(replace_match, text)

    def count_words(self, text: str) -> int:
        """Count dictionary words in text."""
        return sum(
            1 for match in WORD_PATTERN.finditer(text)
            if match.group(0).lower() in self.dictionary
        )
