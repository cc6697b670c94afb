"""Showcase runner - walks through every example and renders console lines."""

import logging
import random
from typing import Callable, Iterator

from src.lib import messages
from src.models import Person, Circle, Rectangle, Triangle
from src.services.functional import (
    add,
    apply_operation,
    double_it,
    double_then_square,
    even_squares,
)
from src.services.immutable import SOURCE_NUMBERS, calculate_nonsense, immutable_doubling
from src.services.pattern_matching import calculate_area, classify_person, compare_numbers
from src.services.pure_functions import (
    RandomSource,
    call_external_service,
    factorial,
    multiply,
)

logger = logging.getLogger(__name__)


class ShowcaseRunner:
    """
    Runs each functional programming example in a fixed order.

    The runner holds no state between sections; each section is a
    generator of labelled lines, and lines() chains them together.

    Sections:
        1. functions - pure functions, higher-order functions, composition
        2. patterns - shape areas, person classification, number comparison
        3. immutability - non-destructive calculation and doubling
        4. purity - multiply, factorial, simulated service calls
    """

    SAMPLE_SHAPES = (
        Circle(radius=5),
        Rectangle(width=4, height=6),
        Triangle(base=3, height=4),
        None,
    )

    SAMPLE_PEOPLE = (
        Person(name="Tommy", age=10),
        Person(name="Jane", age=16),
        Person(name="Bob", age=35),
        Person(name="Martha", age=70),
    )

    SAMPLE_PAIRS = ((0, 0), (5, 3), (2, 7), (4, 4))

    def __init__(self, service_calls: int = 100, rng: RandomSource | None = None):
        """
        Initialize the runner.

        Args:
            service_calls: How many simulated service calls to make
            rng: Randomness for the service calls (defaults to an unseeded generator)
        """
        self._service_calls = service_calls
        self._rng = rng if rng is not None else random.Random()

    def lines(self) -> Iterator[str]:
        """Yield every showcase line, section by section."""
        sections: tuple[Callable[[], Iterator[str]], ...] = (
            self._functions,
            self._patterns,
            self._immutability,
            self._purity,
        )
        for section in sections:
            logger.debug(f"Running section: {section.__name__.lstrip('_')}")
            yield from section()

    def _functions(self) -> Iterator[str]:
        operation = add

        yield messages.DOUBLE_IT_LINE.format(x=4, result=double_it(4))
        yield messages.PURE_ADD_LINE.format(x=2, y=3, result=add(2, 3))

        before = Person(name="Alice", age=30)
        after = before.with_changes(age=31)
        yield messages.IMMUTABILITY_LINE.format(before=before, after=after)

        yield messages.HIGHER_ORDER_LINE.format(
            x=5, y=7, result=apply_operation(operation, 5, 7)
        )

        yield messages.COMPOSITION_LINE.format(x=3, result=double_then_square(3))

        squares = even_squares(range(1, 6))
        yield messages.DECLARATIVE_LINE.format(values=messages.join_numbers(squares))

    def _patterns(self) -> Iterator[str]:
        for shape in self.SAMPLE_SHAPES:
            label = repr(shape) if shape is not None else messages.NO_SHAPE_LABEL
            yield messages.AREA_LINE.format(shape=label, area=calculate_area(shape))

        for person in self.SAMPLE_PEOPLE:
            yield messages.CLASSIFY_LINE.format(person=person, label=classify_person(person))

        for a, b in self.SAMPLE_PAIRS:
            yield messages.COMPARE_LINE.format(a=a, b=b, label=compare_numbers(a, b))

    def _immutability(self) -> Iterator[str]:
        yield messages.CALCULATION_LINE.format(a=2, b=3, result=calculate_nonsense(2, 3))

        doubled = immutable_doubling(SOURCE_NUMBERS)
        yield messages.DOUBLING_HEADER
        yield messages.ORIGINAL_LINE.format(values=messages.join_numbers(SOURCE_NUMBERS))
        yield messages.DOUBLED_LINE.format(values=messages.join_numbers(doubled))

    def _purity(self) -> Iterator[str]:
        yield messages.MULTIPLY_LINE.format(x=4, y=5, result=multiply(4, 5))
        yield messages.FACTORIAL_LINE.format(n=5, result=factorial(5))

        for _ in range(self._service_calls):
            result = call_external_service(self._rng)
            yield messages.SERVICE_RESULT_LINE.format(description=result.describe())
