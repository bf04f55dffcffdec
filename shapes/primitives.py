from __future__ import annotations

from typing import Optional, TextIO
import numpy as np


class PrimitiveError(Exception):
    """Base class for errors raised by the primitive model."""


class CyclicStructureError(PrimitiveError):
    """Raised when a group would end up containing itself."""


def scale_length(value: int, factor: float) -> int:
    """
    Multiply an integer length by `factor` and truncate toward zero.

    The product is taken in single precision, the same way a float factor
    narrows back into an int attribute.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        product = np.float32(value) * np.float32(factor)
    if not np.isfinite(product):
        raise ValueError(f"cannot scale {value} by {factor}: result is not finite")
    return int(product)


class Primitive:
    """
    Anything the editor can draw, move and scale.

    Subclasses implement describe() and scale(); move() is shared and is not
    meant to be overridden.
    """
    kind = "Primitive"

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def describe(self) -> str:
        raise NotImplementedError

    def draw(self, out: Optional[TextIO] = None) -> None:
        print(self.describe(), file=out)

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def scale(self, factor: float) -> None:
        raise NotImplementedError

    def _position(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {self._position()}>"


class Circle(Primitive):
    kind = "Circle"

    def __init__(self, x: int, y: int, radius: int):
        super().__init__(x, y)
        self.radius = radius

    def describe(self) -> str:
        return f"Drawing Circle at {self._position()} with Radius {self.radius}"

    def scale(self, factor: float) -> None:
        self.radius = scale_length(self.radius, factor)


class Rectangle(Primitive):
    kind = "Rectangle"

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(x, y)
        self.width = width
        self.height = height

    def describe(self) -> str:
        return (
            f"Drawing Rectangle at {self._position()} "
            f"with Width {self.width} and Height {self.height}"
        )

    def scale(self, factor: float) -> None:
        # both products are checked before either side is assigned
        width = scale_length(self.width, factor)
        height = scale_length(self.height, factor)
        self.width, self.height = width, height


class Triangle(Primitive):
    """
    Equilateral triangle described by a single side length.
    """
    kind = "Triangle"

    def __init__(self, x: int, y: int, side_length: int):
        super().__init__(x, y)
        self.side_length = side_length

    def describe(self) -> str:
        return f"Drawing Triangle at {self._position()} with Side Length {self.side_length}"

    def scale(self, factor: float) -> None:
        self.side_length = scale_length(self.side_length, factor)
