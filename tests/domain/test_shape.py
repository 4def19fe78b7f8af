import pytest

from solid_principles.domain.shape import Rectangle, Shape, Square


def test_rectangle_area():
    assert Rectangle(width=2, height=3).area() == 6.0


@pytest.mark.parametrize("side", [0.5, 1, 4, 10.25])
def test_square_area(side):
    assert Square(side=side).area() == side * side


def test_square_is_not_a_rectangle():
    assert not issubclass(Square, Rectangle)
    assert not issubclass(Rectangle, Square)


def test_both_shapes_satisfy_shape_capability():
    shapes = [Rectangle(width=2, height=5), Square(side=3)]

    assert all(isinstance(shape, Shape) for shape in shapes)
    assert [shape.area() for shape in shapes] == [10.0, 9.0]


def test_setting_width_leaves_height_alone():
    # Arrange
    rectangle = Rectangle(width=2, height=3)

    # Act
    rectangle.width = 5

    # Assert
    assert rectangle.height == 3
    assert rectangle.area() == 15.0


def test_mutating_one_instance_does_not_touch_another():
    first = Rectangle(width=2, height=3)
    second = Rectangle(width=2, height=3)
    square = Square(side=2)

    first.height = 10
    square.side = 7

    assert second.width == 2 and second.height == 3
    assert first.width == 2
    assert square.area() == 49.0


def test_dimensions_are_coerced_to_float():
    rectangle = Rectangle(width=2, height=3)
    rectangle.height = "4"

    assert isinstance(rectangle.width, float)
    assert rectangle.height == 4.0


def test_positional_constructors():
    assert Rectangle(2, 3).area() == 6.0
    assert Square(4).area() == 16.0
    assert Rectangle(2, height=5) == Rectangle(width=2, height=5)
