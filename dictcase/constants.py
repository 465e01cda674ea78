"""Default settings used when the YAML config leaves a key out."""

DEFAULT_ENCODING = "cp1251"
DEFAULT_BLOCK_SIZE = 500
MAX_FILE_SIZE = 2 * 1024 * 1024  # 2 MiB

DEFAULT_INPUT_EXTENSION = ".txt"
DEFAULT_OUTPUT_EXTENSION = ".txt"

MAX_LINES = 500
SENTENCE_TERMINATORS = "?!."

HANDLER_PATTERN = "*_handler.py"
DEFAULT_HANDLER = "text"
