"""Shape capability."""

from abc import ABC, abstractmethod


class Shape(ABC):
    """Anything with a computable area."""

    @abstractmethod
    def area(self) -> float:
        """Compute the area of the shape."""
