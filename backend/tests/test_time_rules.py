"""Tests for fluentcheck time and duration rules."""

from datetime import datetime, timedelta, timezone

import pytest

from fluentcheck import RuleChain, rules
from fluentcheck.validators import time_rules
from fluentcheck.validators.time_rules import format_duration

NOW = datetime.now()
PAST = NOW - timedelta(hours=1)
FUTURE = NOW + timedelta(hours=1)
MONDAY = datetime(2025, 1, 13)
SUNDAY = datetime(2025, 1, 12)


@pytest.mark.parametrize(
    ("rule", "want_valid", "want_messages"),
    [
        (rules.time_not_zero(NOW), True, []),
        (rules.time_not_zero(datetime.min), False, ["must not be zero time"]),
        (rules.time_not_zero(datetime.min.replace(tzinfo=timezone.utc)), False, ["must not be zero time"]),
        (rules.time_not_zero(None), False, ["must not be zero time"]),
        (rules.time_before(PAST, FUTURE), True, []),
        (rules.time_before(FUTURE, PAST), False, ["must be before cutoff"]),
        (rules.time_before(NOW, NOW), False, ["must be before cutoff"]),
        (rules.time_after(FUTURE, PAST), True, []),
        (rules.time_after(PAST, FUTURE), False, ["must be after cutoff"]),
        (rules.time_between(NOW, PAST, FUTURE), True, []),
        (rules.time_between(PAST, PAST, FUTURE), True, []),
        (rules.time_between(PAST, NOW, FUTURE), False, ["must be between start and end"]),
        (rules.in_past(PAST), True, []),
        (rules.in_past(FUTURE), False, ["must be in the past"]),
        (rules.in_future(FUTURE), True, []),
        (rules.in_future(PAST), False, ["must be in the future"]),
        (rules.is_weekday(MONDAY), True, []),
        (rules.is_weekday(SUNDAY), False, ["must be a weekday"]),
        (rules.is_weekend(SUNDAY), True, []),
        (rules.is_weekend(MONDAY), False, ["must be a weekend day"]),
        (rules.duration_min(timedelta(seconds=5), timedelta(seconds=3)), True, []),
        (rules.duration_min(timedelta(seconds=2), timedelta(seconds=3)), False, ["duration too small: min 3s"]),
        (rules.duration_max(timedelta(seconds=2), timedelta(seconds=3)), True, []),
        (rules.duration_max(timedelta(seconds=4), timedelta(seconds=3)), False, ["duration too large: max 3s"]),
    ],
)
def test_time_rules(rule, want_valid, want_messages) -> None:
    result = rule.validate()

    assert result.is_valid is want_valid
    assert result.messages == want_messages


@pytest.mark.parametrize(
    ("delta", "text"),
    [
        (timedelta(0), "0s"),
        (timedelta(seconds=3), "3s"),
        (timedelta(seconds=1.5), "1.5s"),
        (timedelta(minutes=1, seconds=30), "1m30s"),
        (timedelta(hours=1), "1h0m0s"),
        (timedelta(days=1, minutes=2), "24h2m0s"),
        (timedelta(milliseconds=250), "250ms"),
        (timedelta(microseconds=1500), "1.5ms"),
        (timedelta(microseconds=40), "40µs"),
        (timedelta(seconds=-3), "-3s"),
    ],
)
def test_format_duration(delta, text) -> None:
    assert format_duration(delta) == text


class TestClockDependentRules:
    """in_past/in_future re-read the clock on each evaluation."""

    def test_aware_datetimes_compare_against_aware_now(self) -> None:
        t = datetime.now(timezone.utc) - timedelta(minutes=5)

        assert rules.in_past(t).validate().is_valid is True
        assert rules.in_future(t).validate().is_valid is False

    def test_chain_reevaluates_as_time_passes(self, monkeypatch) -> None:
        deadline = datetime(2030, 1, 1, 12, 0)
        chain = RuleChain().and_(rules.in_future(deadline))

        monkeypatch.setattr(time_rules, "_now_like", lambda t: datetime(2030, 1, 1, 11, 59))
        assert chain.validate().is_valid is True

        monkeypatch.setattr(time_rules, "_now_like", lambda t: datetime(2030, 1, 1, 12, 1))
        result = chain.validate()
        assert result.is_valid is False
        assert result.messages == ["must be in the future"]
