"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit.
New rules are added without modifying the engine.
"""

from abc import ABC, abstractmethod
import functools
from typing import Any, Callable, Optional

from fluentcheck.validators.errors import InvalidRuleError
from fluentcheck.validators.models import ValidationResult

Check = Callable[[], ValidationResult]


class BaseRule(ABC):
    """Abstract base for all rules.

    Contract:
        - validate() takes no arguments; inputs are captured at construction
        - validate() returns a ValidationResult, it does not raise for bad input
        - validate() has no side effects visible to the engine
        - validate() may be called any number of times
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Run the check.

        Returns:
            ValidationResult (is_valid=False plus messages on failure)
        """
        ...

    def __call__(self) -> ValidationResult:
        return self.validate()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class FuncRule(BaseRule):
    """Adapter that lets an ordinary zero-argument function act as a rule."""

    def __init__(self, func: Check, name: Optional[str] = None):
        if not callable(func):
            raise InvalidRuleError(f"rule function must be callable, got {type(func).__name__}")
        self._func = func
        self._name = name or getattr(func, "__name__", type(func).__name__)

    @property
    def name(self) -> str:
        return self._name

    def validate(self) -> ValidationResult:
        return self._func()


def rule_factory(factory: Callable[..., Check]) -> Callable[..., FuncRule]:
    """Decorate a function returning a check so it returns a named FuncRule.

    Usage:
        @rule_factory
        def non_empty(s: str):
            def check() -> ValidationResult:
                ...
            return check
    """

    @functools.wraps(factory)
    def build(*args: Any, **kwargs: Any) -> FuncRule:
        return FuncRule(factory(*args, **kwargs), name=factory.__name__)

    return build


def as_rule(obj: Any) -> BaseRule:
    """Coerce a rule or zero-argument callable into a BaseRule.

    Raises:
        InvalidRuleError: if ``obj`` is None or not callable
    """
    if isinstance(obj, BaseRule):
        return obj
    if obj is None:
        raise InvalidRuleError("cannot attach None as a rule")
    if not callable(obj):
        raise InvalidRuleError(f"rule must be a BaseRule or callable, got {type(obj).__name__}")
    return FuncRule(obj)
