"""Output writing modules."""

from .output_rotator import OutputRotator, RotatorState

__all__ = [
    "OutputRotator",
    "RotatorState"
]
