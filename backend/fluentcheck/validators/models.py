"""Validation models — result type, chain operators, and chain steps.

A result is a plain value: failures are ``is_valid=False`` plus messages,
never an exception.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field, model_validator

from fluentcheck.validators.errors import GENERIC_FAILURE_MESSAGE, RuleViolation, joined_error

if TYPE_CHECKING:
    from fluentcheck.validators.base import BaseRule


class Operator(str, Enum):
    """How a chain step combines with everything before it."""

    AND = "and"
    OR = "or"


class ValidationResult(BaseModel):
    """Outcome of a rule or of a whole chain."""

    is_valid: bool
    messages: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _passing_has_no_messages(self) -> "ValidationResult":
        if self.is_valid and self.messages:
            raise ValueError("a passing result cannot carry failure messages")
        return self

    def __bool__(self) -> bool:
        return self.is_valid

    def to_error(self) -> Optional[RuleViolation]:
        """Joined error for a failing result, None for a passing one.

        A failure without messages still yields an error so callers can raise it.
        """
        if self.is_valid:
            return None
        return joined_error(self.messages) or RuleViolation(GENERIC_FAILURE_MESSAGE, [])


def success() -> ValidationResult:
    """A passing result with no messages."""
    return ValidationResult(is_valid=True, messages=[])


def fail(*messages: str) -> ValidationResult:
    """A failing result carrying ``messages`` in order."""
    return ValidationResult(is_valid=False, messages=list(messages))


@dataclass(frozen=True)
class ChainStep:
    """One attached rule and the operator it was attached with."""

    rule: "BaseRule"
    operator: Operator
