"""
Shapes know their own area, so new shapes never touch the calculator.
"""

import math
from abc import ABC, abstractmethod
from typing import Iterable


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        pass


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius**2


class Triangle(Shape):
    """Added later without changing AreaCalculator."""

    def __init__(self, base: float, height: float):
        self.base = base
        self.height = height

    def area(self) -> float:
        return 0.5 * self.base * self.height


class AreaCalculator:
    def total_area(self, shapes: Iterable[Shape]) -> float:
        return sum(shape.area() for shape in shapes)


def demo() -> None:
    calculator = AreaCalculator()
    shapes = [Rectangle(3, 4), Circle(1), Triangle(3, 4)]
    print(f"Total area: {calculator.total_area(shapes):.2f}")
