"""Rectangles and squares, and what substituting one for the other breaks."""

from __future__ import annotations


class Rectangle:
    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = value

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = value

    def area(self) -> int:
        return self._width * self._height

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"


class Square(Rectangle):
    """A rectangle whose sides always stay equal."""

    def __init__(self, size: int) -> None:
        super().__init__(size, size)

    @Rectangle.width.setter
    def width(self, value: int) -> None:
        self._width = self._height = value

    @Rectangle.height.setter
    def height(self, value: int) -> None:
        self._height = self._width = value


class RectangleFactory:
    """Makes plain rectangles, including square-shaped ones."""

    @staticmethod
    def create_rectangle(width: int, height: int) -> Rectangle:
        return Rectangle(width, height)

    @staticmethod
    def create_square(size: int) -> Rectangle:
        return Rectangle(size, size)


def process(rectangle: Rectangle) -> tuple[int, int]:
    """Set the height to 10, report expected and actual area, and return both."""
    width = rectangle.width
    rectangle.height = 10
    expected, actual = width * 10, rectangle.area()
    print(f"expected area = {expected}, got {actual}")
    return expected, actual