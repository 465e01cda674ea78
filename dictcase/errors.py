"""
Error kinds raised by the text handling pipeline.

Every error here is fatal to the current run. Library code raises them and
lets them propagate; only the CLI host turns them into a report.
"""


class DictcaseError(Exception):
    """Base class for all pipeline errors."""


class ConfigurationError(DictcaseError):
    """A file path or setting is missing or invalid."""


class InputTooLargeError(DictcaseError):
    """A dictionary or input file exceeds the configured size ceiling."""


class InputReadFailureError(DictcaseError):
    """Reading the input failed mid-stream (as opposed to a clean end-of-file)."""


class AbortedProcessingError(DictcaseError):
    """Processing stopped after partial output; the in-progress file was removed."""


class DictionaryError(DictcaseError):
    """The dictionary could not be loaded."""


class DictionaryEmptyError(DictionaryError):
    """The dictionary file yielded no words."""


class DictionaryNotFoundError(DictionaryError, ConfigurationError):
    """The dictionary path does not name a readable file."""


class DictionaryTooLargeError(DictionaryError, InputTooLargeError):
    """The dictionary file exceeds the configured size ceiling."""


class HandlerNotFoundError(DictcaseError):
    """No handler is registered under the requested name."""
