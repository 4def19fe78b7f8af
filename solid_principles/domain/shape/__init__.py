"""Shape example (Liskov Substitution)."""

from .ports import Shape
from .shapes import Rectangle, Square

__all__ = ["Shape", "Rectangle", "Square"]
