"""Pure arithmetic functions and the higher-order helpers that combine them."""

from functools import reduce
from typing import Callable, Iterable


def add(x: int, y: int) -> int:
    return x + y


def double_it(x: int) -> int:
    return x * 2


def square_it(x: int) -> int:
    return x * x


def double_then_square(x: int) -> int:
    """Composition of square_it after double_it, i.e. 4x²."""
    return square_it(double_it(x))


def apply_operation(operation: Callable[[int, int], int], x: int, y: int) -> int:
    """
    Call a binary function received as a value.

    Example:
        >>> apply_operation(add, 5, 7)
        12
    """
    return operation(x, y)


def compose(*functions: Callable) -> Callable:
    """
    Compose single-argument functions right to left.

    compose(f, g)(x) == f(g(x)). With no functions, returns the identity.

    Example:
        >>> compose(square_it, double_it)(3)
        36
    """

    def composed(value):
        return reduce(lambda acc, fn: fn(acc), reversed(functions), value)

    return composed


def even_squares(numbers: Iterable[int]) -> list[int]:
    """Squares of the even values, in input order."""
    return list(map(square_it, filter(lambda n: n % 2 == 0, numbers)))
