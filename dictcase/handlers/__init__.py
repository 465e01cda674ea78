"""Handler capability and registry."""

from .base import Handler
from .registry import HandlerRegistry, default_registry, find_handler_class

__all__ = [
    "Handler",
    "HandlerRegistry",
    "default_registry",
    "find_handler_class"
]
