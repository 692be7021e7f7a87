"""Network rules — email, phone, URL, hostname, IP/CIDR and Luhn checksums.

Format checks are intentionally light; they catch typos, not deliverability.
"""

import ipaddress
from typing import Iterable, Optional, Union
from urllib.parse import urlsplit

from fluentcheck.validators.base import rule_factory
from fluentcheck.validators.models import ValidationResult, fail, success
from fluentcheck.validators.reference_data import (
    E164_EXAMPLE,
    E164_RE,
    EMAIL_LIGHT_RE,
    HOSTNAME_MAX_LEN,
    HOSTNAME_RE,
)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

E164_MESSAGE = f"invalid phone (use E.164, e.g. {E164_EXAMPLE})"


def _parse_ip(s: str) -> Optional[IPAddress]:
    """Parse a bare address; zone suffixes (``fe80::1%eth0``) are rejected."""
    if "%" in s:
        return None
    try:
        return ipaddress.ip_address(s)
    except ValueError:
        return None


def _is_v4(ip: IPAddress) -> bool:
    # IPv4-mapped IPv6 (::ffff:a.b.c.d) counts as IPv4
    return ip.version == 4 or ip.ipv4_mapped is not None


def _email_domain(s: str) -> Optional[str]:
    at = s.rfind("@")
    if at == -1:
        return None
    return s[at + 1:].lower()


# ── Email and phone ──


@rule_factory
def email_valid(s: str):
    def check() -> ValidationResult:
        if s == "":
            return fail("must not be empty")
        if not EMAIL_LIGHT_RE.fullmatch(s):
            return fail("invalid email")
        return success()
    return check


@rule_factory
def email_domain_allowlist(s: str, allowed: Iterable[str]):
    allowed_lower = {d.lower() for d in allowed}

    def check() -> ValidationResult:
        domain = _email_domain(s)
        if domain is None:
            return fail("invalid email")
        if domain not in allowed_lower:
            return fail("email domain not allowed")
        return success()
    return check


@rule_factory
def email_domain_blocklist(s: str, blocked: Iterable[str]):
    blocked_lower = {d.lower() for d in blocked}

    def check() -> ValidationResult:
        domain = _email_domain(s)
        if domain is None:
            return fail("invalid email")
        if domain in blocked_lower:
            return fail("email domain blocked")
        return success()
    return check


@rule_factory
def phone_e164(s: str):
    def check() -> ValidationResult:
        if not E164_RE.fullmatch(s):
            return fail(E164_MESSAGE)
        return success()
    return check


@rule_factory
def phone_with_country_code(s: str, country_code: str):
    """E.164 number that must also start with ``country_code`` (e.g. ``+251``)."""
    def check() -> ValidationResult:
        if not s.startswith(country_code):
            return fail(f"invalid phone: must start with {country_code}")
        if not E164_RE.fullmatch(s):
            return fail(E164_MESSAGE)
        return success()
    return check


# ── URL and hostname ──


@rule_factory
def is_url(s: str):
    def check() -> ValidationResult:
        try:
            parts = urlsplit(s)
        except ValueError:
            return fail("must be URL")
        # Host excludes userinfo; whitespace and control characters are illegal
        host = parts.netloc.rpartition("@")[2]
        if not parts.scheme or not host:
            return fail("must be URL")
        if any(ch.isspace() or not ch.isprintable() for ch in host):
            return fail("must be URL")
        return success()
    return check


@rule_factory
def is_hostname(s: str):
    def check() -> ValidationResult:
        if len(s) > HOSTNAME_MAX_LEN or not HOSTNAME_RE.fullmatch(s):
            return fail("must be hostname")
        return success()
    return check


# ── IP and CIDR ──


@rule_factory
def is_ip(s: str):
    def check() -> ValidationResult:
        if _parse_ip(s) is None:
            return fail("must be IP")
        return success()
    return check


@rule_factory
def is_ipv4(s: str):
    def check() -> ValidationResult:
        ip = _parse_ip(s)
        if ip is None or not _is_v4(ip):
            return fail("must be IPv4")
        return success()
    return check


@rule_factory
def is_ipv6(s: str):
    def check() -> ValidationResult:
        ip = _parse_ip(s)
        if ip is None or _is_v4(ip):
            return fail("must be IPv6")
        return success()
    return check


@rule_factory
def is_cidr(s: str):
    """Address plus decimal prefix length; host bits may be set (``10.0.0.1/8`` passes).

    Netmask and hostmask suffixes (``10.0.0.0/255.0.0.0``) are rejected.
    """
    def check() -> ValidationResult:
        if "/" not in s or "%" in s:
            return fail("must be CIDR")
        prefix = s.rpartition("/")[2]
        if not (prefix.isascii() and prefix.isdigit()):
            return fail("must be CIDR")
        try:
            ipaddress.ip_network(s, strict=False)
        except ValueError:
            return fail("must be CIDR")
        return success()
    return check


# ── Checksums ──


@rule_factory
def luhn_valid(s: str):
    """Luhn checksum over ASCII digits; spaces are ignored."""
    def check() -> ValidationResult:
        total = 0
        digits = 0
        double = False
        for ch in reversed(s):
            if ch == " ":
                continue
            if not "0" <= ch <= "9":
                return fail("must be numeric")
            d = int(ch)
            if double:
                d *= 2
                if d > 9:
                    d -= 9
            total += d
            double = not double
            digits += 1
        if digits == 0 or total % 10 != 0:
            return fail("invalid luhn")
        return success()
    return check
