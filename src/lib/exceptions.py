"""Exception hierarchy for the functional showcase.

All custom exceptions inherit from ShowcaseError to enable
selective catching at different levels.

Hierarchy:
    ShowcaseError (base)
    ├── InvalidArgumentError - Argument outside the handled set (also a ValueError)
    └── ServiceCallError - Simulated service failure, converted to a Result
"""


class ShowcaseError(Exception):
    """
    Base exception for all showcase errors.

    Catching this will catch all custom exceptions from this module.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgumentError(ShowcaseError, ValueError):
    """
    Invalid argument error.

    Raised when a function receives a value it has no branch for.
    Example: an unrecognized Shape subclass passed to calculate_area.

    CLI Exit Code: 3

    Attributes:
        param_name: Name of the offending parameter
    """

    def __init__(self, message: str, param_name: str | None = None):
        self.param_name = param_name
        full_message = f"{message} (Parameter '{param_name}')" if param_name else message
        super().__init__(full_message)


class ServiceCallError(ShowcaseError):
    """
    Simulated external service failure.

    Raised inside call_external_service and caught there; callers
    only ever see a failed Result.
    """

    pass
