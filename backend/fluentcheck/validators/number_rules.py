"""Number rules — bounds, sign and divisibility for ints and floats.

The int and float families share message wording but format their bounds
differently: ints with ``str()``, floats with ``format_float()`` so that
``3.10`` reads ``3.1`` and ``3.0`` reads ``3``.
"""

from decimal import Decimal
import math

from fluentcheck.config import get_settings
from fluentcheck.validators.base import rule_factory
from fluentcheck.validators.models import ValidationResult, fail, success


def format_float(value: float) -> str:
    """Shortest round-tripping decimal text, never in exponent form."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# ── Integers ──


@rule_factory
def int_min(v: int, min_v: int):
    def check() -> ValidationResult:
        if v < min_v:
            return fail(f"must be >= {min_v}")
        return success()
    return check


@rule_factory
def int_max(v: int, max_v: int):
    def check() -> ValidationResult:
        if v > max_v:
            return fail(f"must be <= {max_v}")
        return success()
    return check


@rule_factory
def int_between(v: int, min_v: int, max_v: int):
    def check() -> ValidationResult:
        if v < min_v or v > max_v:
            return fail(f"must be between {min_v} and {max_v}")
        return success()
    return check


@rule_factory
def int_non_zero(v: int):
    def check() -> ValidationResult:
        if v == 0:
            return fail("must not be zero")
        return success()
    return check


@rule_factory
def int_positive(v: int):
    def check() -> ValidationResult:
        if v <= 0:
            return fail("must be > 0")
        return success()
    return check


@rule_factory
def int_non_negative(v: int):
    def check() -> ValidationResult:
        if v < 0:
            return fail("must be >= 0")
        return success()
    return check


@rule_factory
def int_greater_than(v: int, min_v: int):
    def check() -> ValidationResult:
        if v <= min_v:
            return fail(f"must be > {min_v}")
        return success()
    return check


@rule_factory
def int_less_than(v: int, max_v: int):
    def check() -> ValidationResult:
        if v >= max_v:
            return fail(f"must be < {max_v}")
        return success()
    return check


@rule_factory
def int_multiple_of(v: int, m: int):
    """Zero divisor fails with the ordinary message."""
    def check() -> ValidationResult:
        if m == 0 or v % m != 0:
            return fail(f"must be a multiple of {m}")
        return success()
    return check


# ── Floats ──


@rule_factory
def float_min(v: float, min_v: float):
    def check() -> ValidationResult:
        if v < min_v:
            return fail(f"must be >= {format_float(min_v)}")
        return success()
    return check


@rule_factory
def float_max(v: float, max_v: float):
    def check() -> ValidationResult:
        if v > max_v:
            return fail(f"must be <= {format_float(max_v)}")
        return success()
    return check


@rule_factory
def float_between(v: float, min_v: float, max_v: float):
    def check() -> ValidationResult:
        if v < min_v or v > max_v:
            return fail(f"must be between {format_float(min_v)} and {format_float(max_v)}")
        return success()
    return check


@rule_factory
def float_non_zero(v: float):
    def check() -> ValidationResult:
        if v == 0:
            return fail("must not be zero")
        return success()
    return check


@rule_factory
def float_greater_than(v: float, min_v: float):
    def check() -> ValidationResult:
        # Negated so NaN fails
        if not v > min_v:
            return fail(f"must be > {format_float(min_v)}")
        return success()
    return check


@rule_factory
def float_less_than(v: float, max_v: float):
    def check() -> ValidationResult:
        if not v < max_v:
            return fail(f"must be < {format_float(max_v)}")
        return success()
    return check


@rule_factory
def float_multiple_of(v: float, m: float):
    """Pass when ``v`` is within FLOAT_MULTIPLE_TOLERANCE of a multiple of ``m``.

    A zero divisor fails with a dedicated message rather than raising.
    """
    tolerance = get_settings().FLOAT_MULTIPLE_TOLERANCE

    def check() -> ValidationResult:
        if m == 0:
            return fail("must be a multiple of 0 is undefined")
        q = v / m
        if not math.isfinite(q):
            return fail(f"must be a multiple of {format_float(m)}")
        remainder = abs(v - math.trunc(q) * m)
        if remainder > tolerance:
            return fail(f"must be a multiple of {format_float(m)}")
        return success()
    return check
