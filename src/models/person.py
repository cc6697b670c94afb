"""Person entity used by the immutability and classification examples."""

from pydantic import BaseModel, Field


class Person(BaseModel):
    """
    A named person with an age.

    Immutable after creation. A "changed" person is always a new
    instance; see with_changes().
    """

    name: str = Field(..., description="Display name")
    age: int = Field(..., ge=0, description="Age in whole years")

    model_config = {
        "frozen": True,  # Immutable after creation
        "extra": "forbid",  # Unknown fields are rejected, including in with_changes
    }

    def with_changes(self, **changes) -> "Person":
        """
        Create a new Person copying every field except those overridden.

        Unlike model_copy(update=...), the new instance is validated,
        so with_changes(age=-1) is rejected just like the constructor.

        Args:
            **changes: Field values to override

        Returns:
            New Person instance; self is left untouched
        """
        return Person(**{**self.model_dump(), **changes})
