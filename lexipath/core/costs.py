"""Cost vector for the four edit operations."""

from collections.abc import Sequence

from pydantic import BaseModel, Field, ValidationError

from lexipath.core.errors import ConfigurationError
from lexipath.utils import Constants


class CostModel(BaseModel):
    """Immutable costs of insert, delete, substitute and anagram operations."""

    insert: int = Field(ge=0, description="Cost of inserting one letter")
    delete: int = Field(ge=0, description="Cost of deleting one letter")
    substitute: int = Field(ge=0, description="Cost of replacing one letter")
    anagram: int = Field(ge=0, description="Cost of rearranging the whole word")

    model_config = {"frozen": True}

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "CostModel":
        """Build a cost model from raw `insert delete substitute anagram` tokens.

        Raises:
            ConfigurationError: If there are not exactly four tokens, or any
                token is not a non-negative integer.
        """
        if len(tokens) != Constants.COST_COUNT:
            raise ConfigurationError(
                f"Expected {Constants.COST_COUNT} costs, got {len(tokens)}: {' '.join(tokens)!r}"
            )
        try:
            values = [int(token) for token in tokens]
        except ValueError as e:
            raise ConfigurationError(f"Costs must be integers: {' '.join(tokens)!r}") from e
        return cls.from_values(values)

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "CostModel":
        """Build a cost model from four integers in operation order."""
        if len(values) != Constants.COST_COUNT:
            raise ConfigurationError(f"Expected {Constants.COST_COUNT} costs, got {len(values)}")
        insert, delete, substitute, anagram = values
        try:
            return cls(insert=insert, delete=delete, substitute=substitute, anagram=anagram)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid costs: {e}") from e

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.insert, self.delete, self.substitute, self.anagram)
