"""
An area calculator that must be edited for every new shape.
"""

import math
from dataclasses import dataclass
from typing import Iterable

from ...core.exceptions import UnsupportedShapeError


@dataclass
class Rectangle:
    width: float
    height: float


@dataclass
class Circle:
    radius: float


@dataclass
class Triangle:
    """Added later; the calculator does not know about it yet."""

    base: float
    height: float


class AreaCalculator:
    def total_area(self, shapes: Iterable[object]) -> float:
        total = 0.0
        for shape in shapes:
            if isinstance(shape, Rectangle):
                total += shape.width * shape.height
            elif isinstance(shape, Circle):
                total += math.pi * shape.radius**2
            else:
                raise UnsupportedShapeError(f"Unsupported shape: {type(shape).__name__}")
        return total


def demo() -> None:
    calculator = AreaCalculator()
    shapes = [Rectangle(3, 4), Circle(1)]
    print(f"Total area: {calculator.total_area(shapes):.2f}")

    try:
        calculator.total_area(shapes + [Triangle(3, 4)])
    except UnsupportedShapeError as e:
        print(f"Error: {e}")
