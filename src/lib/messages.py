"""Externalized message templates for console output.

All user-facing labels are kept here rather than hardcoded in the
showcase runner, so the wording can change without touching logic.
"""

# =============================================================================
# Simulated Service Messages
# =============================================================================

SERVICE_SUCCESS_MESSAGE = "Operation completed successfully"
SERVICE_FAILURE_MESSAGE = "Operation failed"
SERVICE_ODD_NUMBER_ERROR = "Random number is odd, operation failed"

# =============================================================================
# Showcase Line Templates
# =============================================================================

DOUBLE_IT_LINE = "DoubleIt({x}) = {result}"
PURE_ADD_LINE = "Pure Function: Add({x}, {y}) = {result}"
IMMUTABILITY_LINE = "Immutability: {before.name} age {before.age} -> {after.name} age {after.age}"
HIGHER_ORDER_LINE = "Higher-Order Function: operation({x}, {y}) = {result}"
COMPOSITION_LINE = "Function Composition: doubleThenSquare({x}) = {result}"
DECLARATIVE_LINE = "Declarative Style: even squares = [{values}]"

AREA_LINE = "Pattern Matching: area of {shape} = {area:.2f}"
NO_SHAPE_LABEL = "no shape"
CLASSIFY_LINE = "Pattern Matching: ClassifyPerson({person.name}, {person.age}) = {label}"
COMPARE_LINE = "Pattern Matching: CompareNumbers({a}, {b}) = {label}"

CALCULATION_LINE = "Immutable Calculation: CalculateNonsense({a}, {b}) = {result}"
DOUBLING_HEADER = "Immutable Doubling Example:"
ORIGINAL_LINE = "Original: {values}"
DOUBLED_LINE = "Doubled: {values}"

MULTIPLY_LINE = "Pure Function Example: Multiply({x}, {y}) = {result}"
FACTORIAL_LINE = "Pure Function Example: Factorial({n}) = {result}"
SERVICE_RESULT_LINE = "CallExternalService Result: {description}"


def join_numbers(values) -> str:
    """Render a sequence of numbers as a comma-separated list."""
    return ", ".join(str(v) for v in values)
