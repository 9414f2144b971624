"""Protocols that validators and validatable objects rely on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sized
from typing import Any


def length_of(value: Any) -> int:
    """Length used by the length check: characters for text, items otherwise."""
    if isinstance(value, Sized):
        return len(value)
    raise TypeError(f"cannot take the length of a {type(value).__name__}")


def has_element(value: Any, needle: str) -> bool:
    """Whether text contains a substring, or a mapping contains a key."""
    if isinstance(value, str):
        return needle in value
    if isinstance(value, Mapping):
        return needle in value
    raise TypeError(f"cannot look for an element in a {type(value).__name__}")


class Validate(ABC):
    """An object that can check itself."""

    @abstractmethod
    def validate(self) -> None:
        """Return if valid; raise ``ValidationErrors`` otherwise."""


class ValidateArgs(ABC):
    """An object that checks itself with an extra argument for its validators."""

    @abstractmethod
    def validate_args(self, args: Any) -> None:
        """Return if valid; raise ``ValidationErrors`` otherwise."""