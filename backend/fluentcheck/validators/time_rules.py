"""Time rules — instants (datetime) and durations (timedelta).

in_past/in_future read the clock on every evaluation, so re-validating a chain
can change its outcome as time passes.
"""

from datetime import datetime, timedelta
from typing import Optional

from fluentcheck.validators.base import rule_factory
from fluentcheck.validators.models import ValidationResult, fail, success
from fluentcheck.validators.reference_data import WEEKEND_DAYS


def _now_like(t: datetime) -> datetime:
    """Current time, aware or naive to match ``t`` so the two compare."""
    if t.tzinfo is not None and t.utcoffset() is not None:
        return datetime.now(t.tzinfo)
    return datetime.now()


def _is_zero(t: Optional[datetime]) -> bool:
    if t is None:
        return True
    offset = t.utcoffset()
    return t.replace(tzinfo=None) == datetime.min and (offset is None or offset == timedelta(0))


def format_duration(d: timedelta) -> str:
    """Compact unit text: 3s, 1m30s, 1h0m0s, 1.5s, 250ms, 40µs, 0s."""
    micros = (d.days * 86_400 + d.seconds) * 1_000_000 + d.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        whole, frac = divmod(micros, 1_000)
        frac_text = f".{frac:03d}".rstrip("0") if frac else ""
        return f"{sign}{whole}{frac_text}ms"

    seconds, frac = divmod(micros, 1_000_000)
    hours, rem = divmod(seconds, 3_600)
    minutes, secs = divmod(rem, 60)
    sec_text = f"{secs}" + (f".{frac:06d}".rstrip("0") if frac else "")

    if hours:
        return f"{sign}{hours}h{minutes}m{sec_text}s"
    if minutes:
        return f"{sign}{minutes}m{sec_text}s"
    return f"{sign}{sec_text}s"


# ── Instants ──


@rule_factory
def time_not_zero(t: Optional[datetime]):
    def check() -> ValidationResult:
        if _is_zero(t):
            return fail("must not be zero time")
        return success()
    return check


@rule_factory
def time_before(t: datetime, cutoff: datetime):
    def check() -> ValidationResult:
        if not t < cutoff:
            return fail("must be before cutoff")
        return success()
    return check


@rule_factory
def time_after(t: datetime, cutoff: datetime):
    def check() -> ValidationResult:
        if not t > cutoff:
            return fail("must be after cutoff")
        return success()
    return check


@rule_factory
def time_between(t: datetime, start: datetime, end: datetime):
    """Inclusive on both ends."""
    def check() -> ValidationResult:
        if t < start or t > end:
            return fail("must be between start and end")
        return success()
    return check


@rule_factory
def in_past(t: datetime):
    def check() -> ValidationResult:
        if not t < _now_like(t):
            return fail("must be in the past")
        return success()
    return check


@rule_factory
def in_future(t: datetime):
    def check() -> ValidationResult:
        if not t > _now_like(t):
            return fail("must be in the future")
        return success()
    return check


@rule_factory
def is_weekday(t: datetime):
    def check() -> ValidationResult:
        if t.weekday() in WEEKEND_DAYS:
            return fail("must be a weekday")
        return success()
    return check


@rule_factory
def is_weekend(t: datetime):
    def check() -> ValidationResult:
        if t.weekday() not in WEEKEND_DAYS:
            return fail("must be a weekend day")
        return success()
    return check


# ── Durations ──


@rule_factory
def duration_min(d: timedelta, min_d: timedelta):
    def check() -> ValidationResult:
        if d < min_d:
            return fail(f"duration too small: min {format_duration(min_d)}")
        return success()
    return check


@rule_factory
def duration_max(d: timedelta, max_d: timedelta):
    def check() -> ValidationResult:
        if d > max_d:
            return fail(f"duration too large: max {format_duration(max_d)}")
        return success()
    return check
