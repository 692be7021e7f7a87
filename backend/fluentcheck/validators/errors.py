"""Error types and helpers that turn failure messages into exception values.

The helpers return (never raise) a ``RuleViolation`` so callers decide whether
a failed validation is exceptional in their context.
"""

from typing import Optional, Sequence

from pydantic import BaseModel, Field

# Text of the error raised for a failure that carried no messages
GENERIC_FAILURE_MESSAGE = "validation failed"


class InvalidRuleError(TypeError):
    """Raised when something that is not a rule is attached to a chain."""


class RuleViolation(ValueError):
    """A failed validation expressed as an exception value."""

    def __init__(self, text: str, messages: Sequence[str]):
        super().__init__(text)
        self.messages = list(messages)


class ErrorResponse(BaseModel):
    """Structured error payload: ``{"errors": [...]}``."""

    errors: list[str] = Field(default_factory=list)


def json_error(messages: Sequence[str]) -> Optional[RuleViolation]:
    """Build an error whose text is the JSON ``ErrorResponse`` for ``messages``.

    Returns None when there is nothing to report.
    """
    if not messages:
        return None

    payload = ErrorResponse(errors=list(messages)).model_dump_json()
    return RuleViolation(payload, messages)


def joined_error(messages: Sequence[str]) -> Optional[RuleViolation]:
    """Build an error whose text is ``messages`` joined one per line.

    Returns None when there is nothing to report.
    """
    if not messages:
        return None

    return RuleViolation("\n".join(messages), messages)
