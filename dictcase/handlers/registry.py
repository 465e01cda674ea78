"""
Handler registry.

Maps handler names to constructors. Besides the built-in handler, the
registry can be populated by scanning a directory for modules whose
file names match a pattern (``*_handler.py`` by default) and picking the
first concrete Handler subclass each one defines.
"""

import importlib.util
import inspect
import logging
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional

from ..constants import DEFAULT_HANDLER, HANDLER_PATTERN
from ..errors import ConfigurationError, HandlerNotFoundError
from .base import Handler

logger = logging.getLogger(__name__)

HandlerFactory = Callable[..., Handler]


class HandlerRegistry:
    """Name -> constructor mapping for text handlers."""

    def __init__(self):
        self._factories: dict[str, HandlerFactory] = {}

    def register(self, name: str, factory: HandlerFactory) -> None:
        """
        Register a handler constructor.

        Args:
            name: Name used to select the handler.
            factory: Callable taking config_path and returning a Handler.
        """
        if name in self._factories:
            logger.warning(f"Replacing registered handler: {name}")
        self._factories[name] = factory

    def create(self, name: str, config_path: Optional[str] = None) -> Handler:
        """Instantiate the handler registered under name."""
        try:
            factory = self._factories[name]
        except KeyError:
            raise HandlerNotFoundError(
                f"Unknown handler '{name}'. Available: {', '.join(self.names()) or 'none'}"
            ) from None
        return factory(config_path=config_path)

    def names(self) -> list[str]:
        """Registered handler names, in registration order."""
        return list(self._factories)

    def describe(self, name: str) -> str:
        """Description of a registered handler, or an empty string."""
        factory = self._factories[name]
        return getattr(factory, "description", "") or ""

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def discover(self, directory: str | Path, pattern: str = HANDLER_PATTERN) -> list[str]:
        """
        Register handlers found in a directory.

        Each file matching pattern is imported; the first concrete Handler
        subclass defined in it is registered under the file stem (with a
        trailing ``_handler`` removed).

        Args:
            directory: Directory to scan.
            pattern: Glob pattern for handler module file names.

        Returns:
            Names registered by this scan.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ConfigurationError(f"Handler directory not found: {directory}")

        found = []
        for path in sorted(directory.glob(pattern)):
            module = _load_module(path)
            handler_class = find_handler_class(module)

            if handler_class is None:
                logger.warning(f"No handler class in {path}, skipping")
                continue

            name = path.stem.removesuffix("_handler") or path.stem
            self.register(name, handler_class)
            found.append(name)
            logger.debug(f"Discovered handler '{name}' in {path}")

        return found


def find_handler_class(module: ModuleType) -> Optional[type[Handler]]:
    """Return the first concrete Handler subclass defined in module."""
    for obj in vars(module).values():
        if (
            inspect.isclass(obj)
            and issubclass(obj, Handler)
            and not inspect.isabstract(obj)
            and obj.__module__ == module.__name__
        ):
            return obj
    return None


def _load_module(path: Path) -> ModuleType:
    """Import a Python file as a standalone module."""
    module_name = f"dictcase_handlers.{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ConfigurationError(f"Cannot load handler module: {path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise ConfigurationError(f"Handler module {path} failed to load: {e}") from e
    return module


def default_registry(
    directory: Optional[str | Path] = None,
    pattern: str = HANDLER_PATTERN
) -> HandlerRegistry:
    """
    Build a registry with the built-in handler, plus any found in directory.

    Args:
        directory: Optional directory of extra handler modules.
        pattern: Glob pattern for handler module file names.
    """
    from ..pipeline.orchestrator import TextHandler

    registry = HandlerRegistry()
    registry.register(DEFAULT_HANDLER, TextHandler)

    if directory is not None:
        registry.discover(directory, pattern)

    return registry
