"""Classification functions built on structural pattern matching."""

import math

from src.lib.exceptions import InvalidArgumentError
from src.models import Person, Shape, Circle, Rectangle, Triangle


def calculate_area(shape: Shape | None) -> float:
    """
    Compute the area of a shape.

    Args:
        shape: One of Circle, Rectangle, Triangle, or None for "no shape"

    Returns:
        float: The area; 0.0 when shape is None

    Raises:
        InvalidArgumentError: If shape is any other type, including a
            Shape subclass outside the three handled ones
    """
    match shape:
        case Circle(radius=radius):
            return math.pi * radius**2
        case Rectangle(width=width, height=height):
            return width * height
        case Triangle(base=base, height=height):
            return 0.5 * base * height
        case None:
            return 0.0
        case _:
            raise InvalidArgumentError(
                f"Unknown shape: {type(shape).__name__}", param_name="shape"
            )


def classify_person(person: Person) -> str:
    """Label a person by age. Thresholds are checked in order."""
    match person:
        case Person(age=age) if age < 13:
            return "Child"
        case Person(age=age) if age < 20:
            return "Teenager"
        case Person(age=age) if age < 65:
            return "Adult"
        case Person():
            return "Senior"
        case _:
            raise InvalidArgumentError(
                f"Expected a Person, got {type(person).__name__}", param_name="person"
            )


def compare_numbers(a: int, b: int) -> str:
    """Describe how two integers relate; (0, 0) gets its own label."""
    match (a, b):
        case (0, 0):
            return "Both zero"
        case (x, y) if x > y:
            return "First is larger"
        case (x, y) if x < y:
            return "Second is larger"
        case _:
            return "Both are equal"
