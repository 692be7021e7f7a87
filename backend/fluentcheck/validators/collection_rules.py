"""Collection rules — size bounds, membership and uniqueness.

Size is taken when the rule is evaluated, so a rule over a list that is
still being filled sees its current length.
"""

from typing import Any, Collection, Hashable, Sized

from fluentcheck.validators.base import rule_factory
from fluentcheck.validators.models import ValidationResult, fail, success


@rule_factory
def size_not_empty(items: Sized):
    def check() -> ValidationResult:
        if len(items) == 0:
            return fail("must not be empty")
        return success()
    return check


@rule_factory
def size_min(items: Sized, min_n: int):
    def check() -> ValidationResult:
        if len(items) < min_n:
            return fail(f"size too small: min {min_n}")
        return success()
    return check


@rule_factory
def size_max(items: Sized, max_n: int):
    def check() -> ValidationResult:
        if len(items) > max_n:
            return fail(f"size too large: max {max_n}")
        return success()
    return check


@rule_factory
def size_between(items: Sized, min_n: int, max_n: int):
    def check() -> ValidationResult:
        n = len(items)
        if n < min_n or n > max_n:
            return fail(f"size must be between {min_n} and {max_n}")
        return success()
    return check


@rule_factory
def contains_item(items: Collection[Any], elem: Any):
    def check() -> ValidationResult:
        if elem not in items:
            return fail(f"must contain {elem}")
        return success()
    return check


@rule_factory
def unique_items(items: Collection[Hashable]):
    def check() -> ValidationResult:
        seen = set()
        for item in items:
            if item in seen:
                return fail("must be unique")
            seen.add(item)
        return success()
    return check
