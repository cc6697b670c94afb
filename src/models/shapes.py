"""Shape hierarchy for the pattern matching examples.

Shape is deliberately open so callers can subclass it, but only
Circle, Rectangle and Triangle are handled by calculate_area.
"""

from pydantic import BaseModel, Field


class Shape(BaseModel):
    """Base class for all shapes. Carries no fields of its own."""

    model_config = {
        "frozen": True,
    }


class Circle(Shape):
    """A circle described by its radius."""

    radius: float = Field(..., description="Radius")


class Rectangle(Shape):
    """An axis-aligned rectangle."""

    width: float = Field(..., description="Width")
    height: float = Field(..., description="Height")


class Triangle(Shape):
    """A triangle described by base and perpendicular height."""

    base: float = Field(..., description="Base length")
    height: float = Field(..., description="Height over the base")
