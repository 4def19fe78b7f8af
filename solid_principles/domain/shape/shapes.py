"""Shape variants.

Square and Rectangle are siblings. Neither inherits from the other, so
setting one dimension never silently rewrites another.
"""

from pydantic import BaseModel, ConfigDict, Field

from solid_principles.domain.shape.ports import Shape


class Rectangle(BaseModel, Shape):
    """Rectangle with independently mutable width and height."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    width: float = Field(..., description="Rectangle width")
    height: float = Field(..., description="Rectangle height")

    def __init__(self, width: float, height: float, **data):
        super().__init__(width=width, height=height, **data)

    def area(self) -> float:
        return self.width * self.height


class Square(BaseModel, Shape):
    """Square defined by a single side length."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    side: float = Field(..., description="Side length")

    def __init__(self, side: float, **data):
        super().__init__(side=side, **data)

    def area(self) -> float:
        return self.side * self.side
