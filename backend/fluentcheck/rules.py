"""Rule catalog — every ready-made rule factory in one namespace.

Usage:
    from fluentcheck import RuleChain, rules

    RuleChain().and_(rules.non_empty(email)).and_(rules.email_valid(email))
"""

from fluentcheck.validators.collection_rules import (
    contains_item,
    size_between,
    size_max,
    size_min,
    size_not_empty,
    unique_items,
)
from fluentcheck.validators.network_rules import (
    email_domain_allowlist,
    email_domain_blocklist,
    email_valid,
    is_cidr,
    is_hostname,
    is_ip,
    is_ipv4,
    is_ipv6,
    is_url,
    luhn_valid,
    phone_e164,
    phone_with_country_code,
)
from fluentcheck.validators.number_rules import (
    float_between,
    float_greater_than,
    float_less_than,
    float_max,
    float_min,
    float_multiple_of,
    float_non_zero,
    int_between,
    int_greater_than,
    int_less_than,
    int_max,
    int_min,
    int_multiple_of,
    int_non_negative,
    int_non_zero,
    int_positive,
)
from fluentcheck.validators.string_rules import (
    contains,
    has_prefix,
    has_suffix,
    is_alnum,
    is_alpha,
    is_base64,
    is_hex,
    is_numeric,
    is_slug,
    is_ulid,
    is_uuid_v4,
    len_between,
    matches,
    max_len,
    min_len,
    non_empty,
    one_of,
    trimmed,
)
from fluentcheck.validators.time_rules import (
    duration_max,
    duration_min,
    in_future,
    in_past,
    is_weekday,
    is_weekend,
    time_after,
    time_before,
    time_between,
    time_not_zero,
)

__all__ = [
    # Strings
    "non_empty",
    "min_len",
    "max_len",
    "len_between",
    "matches",
    "one_of",
    "has_prefix",
    "has_suffix",
    "contains",
    "trimmed",
    "is_alpha",
    "is_numeric",
    "is_alnum",
    "is_hex",
    "is_base64",
    "is_slug",
    "is_uuid_v4",
    "is_ulid",
    # Numbers
    "int_min",
    "int_max",
    "int_between",
    "int_non_zero",
    "int_positive",
    "int_non_negative",
    "int_greater_than",
    "int_less_than",
    "int_multiple_of",
    "float_min",
    "float_max",
    "float_between",
    "float_non_zero",
    "float_greater_than",
    "float_less_than",
    "float_multiple_of",
    # Times and durations
    "time_not_zero",
    "time_before",
    "time_after",
    "time_between",
    "in_past",
    "in_future",
    "is_weekday",
    "is_weekend",
    "duration_min",
    "duration_max",
    # Collections
    "size_not_empty",
    "size_min",
    "size_max",
    "size_between",
    "contains_item",
    "unique_items",
    # Email, phone, network
    "email_valid",
    "email_domain_allowlist",
    "email_domain_blocklist",
    "phone_e164",
    "phone_with_country_code",
    "is_url",
    "is_hostname",
    "is_ip",
    "is_ipv4",
    "is_ipv6",
    "is_cidr",
    "luhn_valid",
]
