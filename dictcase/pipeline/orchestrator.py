"""
Main pipeline orchestrator for dictionary case handling.

Coordinates dictionary loading, block reading, case filtering and
output rotation into a single run.
"""

import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field

import yaml

from ..constants import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_ENCODING,
    DEFAULT_INPUT_EXTENSION,
    DEFAULT_OUTPUT_EXTENSION,
    HANDLER_PATTERN,
    MAX_FILE_SIZE,
    MAX_LINES,
    SENTENCE_TERMINATORS,
)
from ..errors import ConfigurationError
from ..filters.case_filter import CaseFilter
from ..handlers.base import Handler
from ..loaders.block_source import BlockSource
from ..loaders.dictionary_loader import load_dictionary
from ..writers.output_rotator import OutputRotator


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "default.yaml"


@dataclass
class ProcessingStats:
    """Statistics from processing one text file."""

    dictionary_words: int = 0
    blocks_read: int = 0
    characters_read: int = 0
    lines_written: int = 0
    words_replaced: int = 0
    output_files: list[str] = field(default_factory=list)


def load_config(config_path: Optional[str | Path] = None) -> dict:
    """
    Load configuration from a YAML file.

    Falls back to the built-in defaults when the file does not exist.

    Args:
        config_path: Path to configuration file (default: config/default.yaml).

    Returns:
        Configuration dict.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or get_default_config()
    except FileNotFoundError:
        return get_default_config()
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid configuration file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration file {config_path} must hold a mapping")
    return config


def get_default_config() -> dict:
    """Return default configuration."""
    return {
        "io": {
            "encoding": DEFAULT_ENCODING,
            "block_size": DEFAULT_BLOCK_SIZE,
            "max_file_size": MAX_FILE_SIZE,
            "input_extension": DEFAULT_INPUT_EXTENSION,
            "output_extension": DEFAULT_OUTPUT_EXTENSION
        },
        "output": {
            "max_lines": MAX_LINES,
            "terminators": SENTENCE_TERMINATORS
        },
        "handlers": {
            "directory": None,
            "pattern": HANDLER_PATTERN
        },
        "logging": {
            "level": "INFO"
        }
    }


class TextHandler(Handler):
    """
    Upper-cases dictionary words and splits the text into numbered files.

    Pipeline for one run:
    1. Load the dictionary
    2. Open the input as a block source
    3. Filter blocks into line-bounded output files
    """

    description = "Upper-case dictionary words, split output by line count"

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the text handler.

        Args:
            config_path: Path to configuration file.
        """
        super().__init__(config_path)
        self.config = load_config(config_path)
        self._setup_logging()

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        log_config = self.config.get("logging") or {}
        level_name = str(log_config.get("level") or "INFO").upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown logging level: {level_name}")

        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        self.logger = logging.getLogger("TextHandler")

    def run(
        self,
        dictionary_path: str | Path,
        input_path: str | Path,
        output_base: str | Path
    ) -> ProcessingStats:
        """
        Process a text file against a dictionary.

        Paths without an extension get the configured input extension.
        Output files are named <output_base><N><output_extension>.

        Args:
            dictionary_path: Word list file.
            input_path: Text file to process.
            output_base: Path prefix for the output files.

        Returns:
            ProcessingStats for the run.
        """
        # Empty YAML sections parse to None
        io_config = self.config.get("io") or {}
        output_config = self.config.get("output") or {}

        encoding = io_config.get("encoding", DEFAULT_ENCODING)
        max_size = io_config.get("max_file_size", MAX_FILE_SIZE)
        in_ext = io_config.get("input_extension", DEFAULT_INPUT_EXTENSION)
        out_ext = io_config.get("output_extension", DEFAULT_OUTPUT_EXTENSION)

        dictionary_path = _with_extension(dictionary_path, in_ext)
        input_path = _with_extension(input_path, in_ext)
        output_base = Path(output_base)
        if output_base.suffix == out_ext:
            output_base = output_base.with_suffix("")

        self.logger.info(f"Processing: {input_path}")
        self.logger.info(f"Dictionary: {dictionary_path}")

        # Step 1: Load dictionary
        dictionary = load_dictionary(
            dictionary_path, max_size=max_size, encoding=encoding
        )

        # Step 2: Open block source (size is checked here, before any output)
        source = BlockSource(
            input_path,
            block_size=io_config.get("block_size", DEFAULT_BLOCK_SIZE),
            max_size=max_size,
            encoding=encoding
        )

        # Step 3: Filter into rotated output files
        case_filter = CaseFilter(
            dictionary,
            max_lines=output_config.get("max_lines", MAX_LINES),
            terminators=output_config.get("terminators", SENTENCE_TERMINATORS),
            encoding=encoding
        )
        rotator = OutputRotator(
            case_filter, output_base, extension=out_ext, encoding=encoding
        )
        files = rotator.write(source)

        stats = ProcessingStats(
            dictionary_words=len(dictionary),
            blocks_read=rotator.blocks_read,
            characters_read=rotator.chars_read,
            lines_written=rotator.lines_total,
            words_replaced=rotator.words_replaced,
            output_files=[str(path) for path in files]
        )

        self.logger.info(
            f"Done: {len(files)} files, {stats.lines_written} lines, "
            f"{stats.words_replaced} words upper-cased"
        )
        return stats


def _with_extension(path: str | Path, extension: str) -> Path:
    """Append extension to a path that has none."""
    path = Path(path)
    if path.suffix or not extension:
        return path
    return path.with_name(path.name + extension)
