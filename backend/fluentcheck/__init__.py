"""fluentcheck — fluent AND/OR composition of validation rules."""

from fluentcheck import rules
from fluentcheck.config import Settings, get_settings
from fluentcheck.logging_config import configure_logging
from fluentcheck.validators import (
    BaseRule,
    ChainStep,
    ErrorResponse,
    FuncRule,
    InvalidRuleError,
    Operator,
    RuleChain,
    RuleViolation,
    ValidationResult,
    as_rule,
    fail,
    joined_error,
    json_error,
    rule_factory,
    success,
)

__version__ = "0.1.0"

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
    "rules",
    "Settings",
    "get_settings",
    "configure_logging",
]
