"""Reference data — compiled patterns and constants shared by the rule catalog.

All patterns are matched with ``fullmatch`` so a trailing newline never slips
through an anchored expression.
"""

import re

# ──────────────────────────────────────────────────────────────────────
# STRING SHAPES
# ──────────────────────────────────────────────────────────────────────

HEX_RE = re.compile(r"[0-9a-fA-F]+")
SLUG_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
UUID_V4_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", re.IGNORECASE | re.ASCII)

# Crockford base32, first char limited so the 128-bit value cannot overflow
ULID_RE = re.compile(r"[0-7][0-9A-HJKMNP-TV-Z]{25}")

# ──────────────────────────────────────────────────────────────────────
# EMAIL / PHONE
# ──────────────────────────────────────────────────────────────────────

# Deliberately light: something@something.tld, no whitespace, one @
EMAIL_LIGHT_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
E164_RE = re.compile(r"\+[1-9]\d{7,14}", re.ASCII)
E164_EXAMPLE = "+15551234567"

# ──────────────────────────────────────────────────────────────────────
# HOSTNAMES
# ──────────────────────────────────────────────────────────────────────

HOSTNAME_MAX_LEN = 253
HOSTNAME_RE = re.compile(
    r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*",
    re.IGNORECASE | re.ASCII,
)

# ──────────────────────────────────────────────────────────────────────
# CALENDAR
# ──────────────────────────────────────────────────────────────────────

WEEKEND_DAYS = frozenset({5, 6})  # datetime.weekday(): Saturday, Sunday
