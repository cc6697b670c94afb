"""Pure functions, and one deliberately impure simulated service call."""

import logging
import random
from typing import Protocol, runtime_checkable

from src.lib.exceptions import ServiceCallError
from src.lib.messages import (
    SERVICE_FAILURE_MESSAGE,
    SERVICE_ODD_NUMBER_ERROR,
    SERVICE_SUCCESS_MESSAGE,
)
from src.models import Result

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """
    Contract for the randomness used by call_external_service.

    random.Random satisfies it, so a seeded generator can be passed
    in tests to make the outcome reproducible.
    """

    def randint(self, a: int, b: int) -> int:
        """
        Return a random integer N such that a <= N <= b.

        Contract:
            - MUST return a value within the inclusive bounds
        """
        ...


def multiply(x: int, y: int) -> int:
    return x * y


def factorial(n: int) -> int:
    """
    Recursive factorial. Any n <= 1, including negatives, returns 1.

    Python integers never overflow; the limit is recursion depth, so
    n close to sys.getrecursionlimit() raises RecursionError.
    """
    return 1 if n <= 1 else n * factorial(n - 1)


def call_external_service(rng: RandomSource | None = None) -> Result:
    """
    Simulate a call to a service that fails about half the time.

    An odd draw from [1, 1000] is treated as a failure. The failure is
    raised and caught here, so this function never raises.

    Args:
        rng: Source of randomness (defaults to a fresh, unseeded generator)

    Returns:
        Result: successful on an even draw, failed on an odd one

    Side Effects:
        Logs one line describing the outcome
    """
    rng = rng if rng is not None else random.Random()

    try:
        number = rng.randint(1, 1000)
        if number % 2 != 0:
            raise ServiceCallError(SERVICE_ODD_NUMBER_ERROR)

        logger.info(f"External service call succeeded (drew {number})")
        return Result.successful(SERVICE_SUCCESS_MESSAGE)

    except ServiceCallError as e:
        logger.warning(f"Error: {e.message}")
        return Result.failed(SERVICE_FAILURE_MESSAGE)
