"""
Dictionary loading.

Reads a plain-text word list (one word per line) into an immutable,
lowercased set of words.
"""

import logging
from pathlib import Path

from ..constants import DEFAULT_ENCODING, MAX_FILE_SIZE
from ..errors import (
    DictionaryEmptyError,
    DictionaryError,
    DictionaryNotFoundError,
    DictionaryTooLargeError,
)

logger = logging.getLogger(__name__)


def load_dictionary(
    path: str | Path,
    max_size: int = MAX_FILE_SIZE,
    encoding: str = DEFAULT_ENCODING
) -> frozenset[str]:
    """
    Load a word list file into a set of lowercase words.

    Surrounding whitespace is stripped from each line and blank lines
    are skipped.

    Args:
        path: Path to the word list file.
        max_size: Largest accepted file size in bytes.
        encoding: Text encoding of the file.

    Returns:
        Frozen set of lowercase dictionary words.

    Raises:
        DictionaryNotFoundError: The path is not a file.
        DictionaryTooLargeError: The file is larger than max_size.
        DictionaryEmptyError: The file holds no words.
        DictionaryError: The file could not be read or decoded.
    """
    path = Path(path)

    if not path.is_file():
        raise DictionaryNotFoundError(f"Dictionary file not found: {path}")

    size = path.stat().st_size
    if size > max_size:
        raise DictionaryTooLargeError(
            f"Dictionary file {path} is {size} bytes, "
            f"larger than the {max_size} byte limit"
        )

    try:
        with open(path, "r", encoding=encoding) as f:
            words = frozenset(
                line.strip().lower() for line in f if line.strip()
            )
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(f"Cannot read dictionary {path}: {e}") from e

    if not words:
        raise DictionaryEmptyError(f"Dictionary is empty: {path}")

    logger.info(f"Loaded {len(words)} dictionary words from {path}")
    return words
