"""Domain models for the functional showcase."""

from src.models.person import Person
from src.models.shapes import Shape, Circle, Rectangle, Triangle
from src.models.result import Result

__all__ = [
    "Person",
    "Shape",
    "Circle",
    "Rectangle",
    "Triangle",
    "Result",
]
