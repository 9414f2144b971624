"""URL check following the parsing rules of the WHATWG URL standard."""

from __future__ import annotations

import re
from urllib.parse import unquote

import idna

from fieldguard.ip import validate_ip_v6

_SPECIAL_SCHEMES = frozenset({"ftp", "file", "http", "https", "ws", "wss"})
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_SPECIAL_AUTHORITY_RE = re.compile(r"[^/\\?#]*")
_AUTHORITY_RE = re.compile(r"[^/?#]*")
_WINDOWS_DRIVE_RE = re.compile(r"[A-Za-z][:|]")

_C0_OR_SPACE = "".join(chr(code) for code in range(0x21))
_TAB_OR_NEWLINE = {ord("\t"): None, ord("\n"): None, ord("\r"): None}

_FORBIDDEN_HOST = frozenset("\x00\t\n\r #/:<>?@[\\]^|")
_FORBIDDEN_DOMAIN = _FORBIDDEN_HOST | {chr(code) for code in range(0x20)} | {"%", "\x7f"}

_DIGITS = {8: "01234567", 10: "0123456789", 16: "0123456789abcdefABCDEF"}
_MAX_PORT = 65535


def validate_url(val: str) -> bool:
    """Whether the string parses as an absolute URL."""
    if not isinstance(val, str):
        raise TypeError(f"expected a string, got {type(val).__name__}")
    text = val.strip(_C0_OR_SPACE).translate(_TAB_OR_NEWLINE)
    scheme, sep, rest = text.partition(":")
    if not sep or not _SCHEME_RE.fullmatch(scheme):
        return False
    scheme = scheme.lower()
    if scheme == "file":
        return _valid_file(rest)
    if scheme in _SPECIAL_SCHEMES:
        return _valid_special(rest)
    return _valid_non_special(rest)


def _valid_special(rest: str) -> bool:
    authority = _SPECIAL_AUTHORITY_RE.match(rest.lstrip("/\\")).group()
    _, at, host_port = authority.rpartition("@")
    if at and not host_port:
        return False
    host, port = _split_port(host_port)
    if not host:
        return False
    return _valid_port(port) and _valid_special_host(host)


def _valid_file(rest: str) -> bool:
    if len(rest) < 2 or rest[0] not in "/\\" or rest[1] not in "/\\":
        return True
    host = _SPECIAL_AUTHORITY_RE.match(rest[2:]).group()
    if not host or _WINDOWS_DRIVE_RE.fullmatch(host):
        return True
    return _valid_special_host(host)


def _valid_non_special(rest: str) -> bool:
    if not rest.startswith("//"):
        return True
    authority = _AUTHORITY_RE.match(rest[2:]).group()
    _, at, host_port = authority.rpartition("@")
    if at and not host_port:
        return False
    host, port = _split_port(host_port)
    if port is not None and not host:
        return False
    if not _valid_port(port):
        return False
    if host.startswith("["):
        return host.endswith("]") and validate_ip_v6(host[1:-1])
    return not any(ch in _FORBIDDEN_HOST for ch in host)


def _split_port(host_port: str) -> tuple[str, str | None]:
    """Split at the first colon that is not inside an IPv6 literal."""
    inside_brackets = False
    for position, ch in enumerate(host_port):
        if ch == "[":
            inside_brackets = True
        elif ch == "]":
            inside_brackets = False
        elif ch == ":" and not inside_brackets:
            return host_port[:position], host_port[position + 1 :]
    return host_port, None


def _valid_port(port: str | None) -> bool:
    if not port:
        return True
    return all(ch in _DIGITS[10] for ch in port) and int(port) <= _MAX_PORT


def _valid_special_host(host: str) -> bool:
    if host.startswith("["):
        return host.endswith("]") and validate_ip_v6(host[1:-1])
    try:
        domain = _domain_to_ascii(unquote(host, errors="replace"))
    except ValueError:
        return False
    if not domain or any(ch in _FORBIDDEN_DOMAIN for ch in domain):
        return False
    if _ends_in_number(domain):
        return _valid_ipv4(domain)
    return True


def _domain_to_ascii(domain: str) -> str:
    mapped = idna.uts46_remap(domain, std3_rules=False, transitional=False)
    return ".".join(
        label if label.isascii() else idna.alabel(label).decode("ascii")
        for label in mapped.split(".")
    )


def _ends_in_number(domain: str) -> bool:
    labels = domain.split(".")
    if labels[-1] == "":
        if len(labels) == 1:
            return False
        labels.pop()
    last = labels[-1]
    if last and all(ch in _DIGITS[10] for ch in last):
        return True
    return last[:2].lower() == "0x" and all(ch in _DIGITS[16] for ch in last[2:])


def _ipv4_number(part: str) -> int:
    if not part:
        raise ValueError("empty IPv4 part")
    base = 10
    if part[:2].lower() == "0x":
        part, base = part[2:], 16
    elif len(part) > 1 and part[0] == "0":
        part, base = part[1:], 8
    if not part:
        return 0
    if not all(ch in _DIGITS[base] for ch in part):
        raise ValueError(f"invalid IPv4 part {part!r}")
    return int(part, base)


def _valid_ipv4(domain: str) -> bool:
    parts = domain.split(".")
    if parts[-1] == "" and len(parts) > 1:
        parts.pop()
    if len(parts) > 4:
        return False
    try:
        numbers = [_ipv4_number(part) for part in parts]
    except ValueError:
        return False
    if any(number > 255 for number in numbers[:-1]):
        return False
    return numbers[-1] < 256 ** (5 - len(numbers))