"""E-mail address check following the HTML5 definition of a valid address."""

from __future__ import annotations

import re

import idna

from fieldguard.ip import validate_ip

# The local part as HTML forms accept it; quoted local parts are not allowed.
_USER_RE = re.compile(r"[a-z0-9.!#$%&'*+/=?^_`{|}~-]+", re.IGNORECASE)
_DOMAIN_RE = re.compile(
    r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*",
    re.IGNORECASE,
)
# Address literal form: an IPv4 or IPv6 address in brackets (SMTP 4.1.3).
_LITERAL_RE = re.compile(r"\[([A-f0-9:.]+)\]\Z", re.IGNORECASE)

_MAX_USER_LENGTH = 64
_MAX_DOMAIN_LENGTH = 255


def validate_email(val: str) -> bool:
    """Whether the string is an e-mail address as HTML forms define it.

    The local part may hold at most 64 characters and the domain at most 255.
    Internationalised domains are accepted once converted to ASCII.
    """
    if not isinstance(val, str):
        raise TypeError(f"expected a string, got {type(val).__name__}")
    if not val or "@" not in val:
        return False
    user_part, _, domain_part = val.rpartition("@")

    if len(user_part) > _MAX_USER_LENGTH or len(domain_part) > _MAX_DOMAIN_LENGTH:
        return False
    if not _USER_RE.fullmatch(user_part):
        return False
    if _valid_domain_part(domain_part):
        return True

    try:
        ascii_domain = idna.encode(domain_part, uts46=True).decode("ascii")
    except ValueError:
        return False
    return _valid_domain_part(ascii_domain)


def _valid_domain_part(domain_part: str) -> bool:
    if _DOMAIN_RE.fullmatch(domain_part):
        return True
    literal = _LITERAL_RE.search(domain_part)
    return literal is not None and validate_ip(literal.group(1))