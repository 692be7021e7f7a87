"""Tests for fluentcheck string rules."""

import base64
import re

import pytest

from fluentcheck import rules

LOWER = re.compile(r"^[a-z]+$")


@pytest.mark.parametrize(
    ("rule", "want_valid", "want_messages"),
    [
        (rules.non_empty("x"), True, []),
        (rules.non_empty(""), False, ["must not be empty"]),
        (rules.min_len("abcd", 3), True, []),
        (rules.min_len("ab", 3), False, ["too short: min 3"]),
        (rules.max_len("ab", 3), True, []),
        (rules.max_len("abcd", 3), False, ["too long: max 3"]),
        (rules.len_between("abc", 2, 3), True, []),
        (rules.len_between("a", 2, 3), False, ["length must be between 2 and 3"]),
        (rules.matches("abc", LOWER), True, []),
        (rules.matches("ab1", LOWER), False, ["must match pattern"]),
        (rules.matches("xx42yy", r"\d+"), True, []),
        (rules.one_of("b", ["a", "b"]), True, []),
        (rules.one_of("c", ["a", "b"]), False, ["must be one of: a, b"]),
        (rules.one_of("B", ["a", "b"], case_sensitive=False), True, []),
        (rules.one_of("B", ["a", "b"], case_sensitive=True), False, ["must be one of: a, b"]),
        (rules.has_prefix("foobar", "foo"), True, []),
        (rules.has_prefix("bar", "foo"), False, ["must start with foo"]),
        (rules.has_suffix("foobar", "bar"), True, []),
        (rules.has_suffix("foo", "bar"), False, ["must end with bar"]),
        (rules.contains("hello world", "world"), True, []),
        (rules.contains("hello", "world"), False, ["must contain world"]),
        (rules.trimmed("abc"), True, []),
        (rules.trimmed(" abc "), False, ["must not have leading/trailing spaces"]),
        (rules.is_alpha("abcXYZ"), True, []),
        (rules.is_alpha(""), True, []),
        (rules.is_alpha("abc123"), False, ["must contain only letters"]),
        (rules.is_numeric("123"), True, []),
        (rules.is_numeric(""), False, ["must be numeric"]),
        (rules.is_numeric("12a"), False, ["must be numeric"]),
        (rules.is_alnum("abc123"), True, []),
        (rules.is_alnum("abc-123"), False, ["must be alphanumeric"]),
        (rules.is_hex("0A1b"), True, []),
        (rules.is_hex("g001"), False, ["must be hex"]),
        (rules.is_hex(""), False, ["must be hex"]),
        (rules.is_base64(base64.b64encode(b"hi").decode()), True, []),
        (rules.is_base64("not-base64"), False, ["must be base64"]),
        (rules.is_base64("aGk"), False, ["must be base64"]),
        (rules.is_slug("hello-world"), True, []),
        (rules.is_slug("Hello World"), False, ["must be a slug"]),
        (rules.is_slug("hello--world"), False, ["must be a slug"]),
        (rules.is_uuid_v4("550e8400-e29b-41d4-a716-446655440000"), True, []),
        (rules.is_uuid_v4("550E8400-E29B-41D4-A716-446655440000"), True, []),
        (rules.is_uuid_v4("550e8400-e29b-21d4-a716-446655440000"), False, ["must be UUID v4"]),
        (rules.is_ulid("01ARZ3NDEKTSV4RRFFQ69G5FAV"), True, []),
        (rules.is_ulid("Z1ARZ3NDEKTSV4RRFFQ69G5FAV"), False, ["must be ULID"]),
    ],
)
def test_string_rules(rule, want_valid, want_messages) -> None:
    result = rule.validate()

    assert result.is_valid is want_valid
    assert result.messages == want_messages


class TestStringRuleDetails:
    """Behavior beyond the message table."""

    def test_lengths_count_characters(self) -> None:
        assert rules.max_len("héllo", 5).validate().is_valid is True

    def test_anchored_patterns_reject_trailing_newline(self) -> None:
        assert rules.is_hex("abc\n").validate().is_valid is False
        assert rules.is_slug("abc\n").validate().is_valid is False

    def test_rules_are_named_after_factories(self) -> None:
        assert rules.min_len("ab", 3).name == "min_len"
        assert rules.is_uuid_v4("x").name == "is_uuid_v4"
