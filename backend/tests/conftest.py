"""Pytest configuration and fixtures for fluentcheck tests."""

from collections.abc import Callable, Generator

import pytest
import structlog

from fluentcheck.config import get_settings
from fluentcheck.validators import BaseRule, ValidationResult, fail, success


class CountingRule(BaseRule):
    """Rule returning a fixed result and recording how often it ran."""

    def __init__(self, result: ValidationResult, name: str = "counting"):
        self._result = result
        self._name = name
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    def validate(self) -> ValidationResult:
        self.calls += 1
        return self._result


@pytest.fixture
def passing() -> Callable[[], CountingRule]:
    """Factory for counting rules that always pass."""
    return lambda: CountingRule(success(), name="passing")


@pytest.fixture
def failing() -> Callable[[str], CountingRule]:
    """Factory for counting rules that always fail with one message."""
    return lambda msg: CountingRule(fail(msg), name=f"failing:{msg}")


@pytest.fixture(autouse=True)
def _reset_state() -> Generator[None, None, None]:
    """Isolate cached settings and structlog configuration per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
