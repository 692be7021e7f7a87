"""String rules — emptiness, length, pattern, character-class and identifier shapes.

Lengths count code points, not encoded bytes.
"""

import base64
import binascii
import re
from typing import Iterable, Union

from fluentcheck.validators.base import rule_factory
from fluentcheck.validators.models import ValidationResult, fail, success
from fluentcheck.validators.reference_data import HEX_RE, SLUG_RE, ULID_RE, UUID_V4_RE


@rule_factory
def non_empty(s: str):
    def check() -> ValidationResult:
        if s == "":
            return fail("must not be empty")
        return success()
    return check


@rule_factory
def min_len(s: str, n: int):
    def check() -> ValidationResult:
        if len(s) < n:
            return fail(f"too short: min {n}")
        return success()
    return check


@rule_factory
def max_len(s: str, n: int):
    def check() -> ValidationResult:
        if len(s) > n:
            return fail(f"too long: max {n}")
        return success()
    return check


@rule_factory
def len_between(s: str, min_n: int, max_n: int):
    def check() -> ValidationResult:
        if not min_n <= len(s) <= max_n:
            return fail(f"length must be between {min_n} and {max_n}")
        return success()
    return check


@rule_factory
def matches(s: str, pattern: Union[str, re.Pattern]):
    """Pass when ``pattern`` matches anywhere in ``s``; anchor it for a full match."""
    regex = re.compile(pattern)

    def check() -> ValidationResult:
        if regex.search(s) is None:
            return fail("must match pattern")
        return success()
    return check


@rule_factory
def one_of(s: str, allowed: Iterable[str], case_sensitive: bool = True):
    allowed = list(allowed)

    def check() -> ValidationResult:
        if case_sensitive:
            found = s in allowed
        else:
            found = s.lower() in {a.lower() for a in allowed}
        if not found:
            return fail("must be one of: " + ", ".join(allowed))
        return success()
    return check


@rule_factory
def has_prefix(s: str, prefix: str):
    def check() -> ValidationResult:
        if not s.startswith(prefix):
            return fail(f"must start with {prefix}")
        return success()
    return check


@rule_factory
def has_suffix(s: str, suffix: str):
    def check() -> ValidationResult:
        if not s.endswith(suffix):
            return fail(f"must end with {suffix}")
        return success()
    return check


@rule_factory
def contains(s: str, substr: str):
    def check() -> ValidationResult:
        if substr not in s:
            return fail(f"must contain {substr}")
        return success()
    return check


@rule_factory
def trimmed(s: str):
    def check() -> ValidationResult:
        if s.strip() != s:
            return fail("must not have leading/trailing spaces")
        return success()
    return check


# ── Character classes ──
# Empty input passes is_alpha/is_alnum (nothing offends) but fails is_numeric.


@rule_factory
def is_alpha(s: str):
    def check() -> ValidationResult:
        if not all(ch.isalpha() for ch in s):
            return fail("must contain only letters")
        return success()
    return check


@rule_factory
def is_numeric(s: str):
    def check() -> ValidationResult:
        if not s or not s.isdecimal():
            return fail("must be numeric")
        return success()
    return check


@rule_factory
def is_alnum(s: str):
    def check() -> ValidationResult:
        if not all(ch.isalpha() or ch.isdecimal() for ch in s):
            return fail("must be alphanumeric")
        return success()
    return check


# ── Encodings and identifiers ──


@rule_factory
def is_hex(s: str):
    def check() -> ValidationResult:
        if not HEX_RE.fullmatch(s):
            return fail("must be hex")
        return success()
    return check


@rule_factory
def is_base64(s: str):
    def check() -> ValidationResult:
        try:
            base64.b64decode(s, validate=True)
        except (binascii.Error, ValueError):
            return fail("must be base64")
        return success()
    return check


@rule_factory
def is_slug(s: str):
    def check() -> ValidationResult:
        if not SLUG_RE.fullmatch(s):
            return fail("must be a slug")
        return success()
    return check


@rule_factory
def is_uuid_v4(s: str):
    def check() -> ValidationResult:
        if not UUID_V4_RE.fullmatch(s):
            return fail("must be UUID v4")
        return success()
    return check


@rule_factory
def is_ulid(s: str):
    def check() -> ValidationResult:
        if not ULID_RE.fullmatch(s):
            return fail("must be ULID")
        return success()
    return check
