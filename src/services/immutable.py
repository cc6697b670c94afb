"""Examples of computing new values without modifying existing ones."""

import logging
from typing import Iterable

from src.lib.messages import join_numbers

logger = logging.getLogger(__name__)

SOURCE_NUMBERS: tuple[int, ...] = (1, 2, 3, 4, 5)


def calculate_nonsense(a: int, b: int) -> int:
    """
    Square the sum of (a + b) and (a * b).

    Every intermediate is bound once and never reassigned.

    Example:
        >>> calculate_nonsense(2, 3)  # (5 + 6) ** 2
        121
    """
    total = a + b
    product = a * b
    return (total + product) ** 2


def double_all(numbers: Iterable[int]) -> tuple[int, ...]:
    """Return a new tuple holding each value doubled."""
    return tuple(n * 2 for n in numbers)


def immutable_doubling(numbers: tuple[int, ...] = SOURCE_NUMBERS) -> tuple[int, ...]:
    """
    Double a fixed sequence, leaving the source untouched.

    Args:
        numbers: Source values (defaults to 1..5)

    Returns:
        tuple: A new tuple; for the default source (2, 4, 6, 8, 10)
    """
    doubled = double_all(numbers)
    logger.debug(f"Original: {join_numbers(numbers)}")
    logger.debug(f"Doubled: {join_numbers(doubled)}")
    return doubled
