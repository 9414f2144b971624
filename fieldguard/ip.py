"""Checks for IPv4 and IPv6 address strings."""

from __future__ import annotations

import ipaddress
from typing import Optional, Union

_Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _parse(val: str) -> Optional[_Address]:
    if not isinstance(val, str):
        raise TypeError(f"expected a string, got {type(val).__name__}")
    # Zone identifiers ("fe80::1%eth0") are not part of a plain address.
    if "%" in val:
        return None
    try:
        return ipaddress.ip_address(val)
    except ValueError:
        return None


def validate_ip(val: str) -> bool:
    """Whether the string is an IPv4 or IPv6 address."""
    return _parse(val) is not None


def validate_ip_v4(val: str) -> bool:
    """Whether the string is an IPv4 address."""
    return isinstance(_parse(val), ipaddress.IPv4Address)


def validate_ip_v6(val: str) -> bool:
    """Whether the string is an IPv6 address."""
    return isinstance(_parse(val), ipaddress.IPv6Address)