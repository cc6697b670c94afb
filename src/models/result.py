"""Result value returned by fallible operations instead of raising."""

from pydantic import BaseModel, Field


class Result(BaseModel):
    """
    Outcome of a fallible operation, reported as data.

    Immutable after creation. Build instances through successful()
    or failed() rather than the constructor.

    Example:
        result = call_external_service()
        if result.is_failure():
            print(result.message)
    """

    success: bool = Field(default=False, description="Whether the operation succeeded")
    message: str = Field(default="", description="Human-readable outcome")

    model_config = {
        "frozen": True,
    }

    @classmethod
    def successful(cls, message: str) -> "Result":
        """Create a successful Result carrying the given message."""
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, message: str) -> "Result":
        """Create a failed Result carrying the given message."""
        return cls(success=False, message=message)

    def is_success(self) -> bool:
        return self.success

    def is_failure(self) -> bool:
        return not self.success

    def describe(self) -> str:
        """Render as "Success = True, Message = '...'" for console output."""
        return f"Success = {self.success}, Message = '{self.message}'"
