"""Rule composition — chain rules with AND/OR into one validation result.

Usage:
    from fluentcheck.validators import RuleChain

    result = RuleChain().and_(rule_a).or_(rule_b).validate()
    if not result.is_valid:
        # Report result.messages
"""

from fluentcheck.validators.base import BaseRule, FuncRule, as_rule, rule_factory
from fluentcheck.validators.engine import RuleChain
from fluentcheck.validators.errors import (
    ErrorResponse,
    InvalidRuleError,
    RuleViolation,
    joined_error,
    json_error,
)
from fluentcheck.validators.models import ChainStep, Operator, ValidationResult, fail, success

__all__ = [
    "RuleChain",
    "BaseRule",
    "FuncRule",
    "as_rule",
    "rule_factory",
    "ValidationResult",
    "ChainStep",
    "Operator",
    "success",
    "fail",
    "ErrorResponse",
    "InvalidRuleError",
    "RuleViolation",
    "json_error",
    "joined_error",
]
