"""Length, range, equality and presence checks."""

from __future__ import annotations

from typing import Any, Optional

from fieldguard.traits import length_of


def validate_length(
    value: Any,
    min: Optional[int] = None,
    max: Optional[int] = None,
    equal: Optional[int] = None,
) -> bool:
    """Whether the length of ``value`` lies within the given bounds.

    When ``equal`` is given, ``min`` and ``max`` are ignored. Text is measured
    in characters, collections in items.
    """
    length = length_of(value)
    if equal is not None:
        return length == equal
    if min is not None and length < min:
        return False
    if max is not None and length > max:
        return False
    return True


def validate_range(value: Any, min: Any = None, max: Any = None) -> bool:
    """Whether ``value`` lies between ``min`` and ``max``, each optional and inclusive."""
    if max is not None and value > max:
        return False
    if min is not None and value < min:
        return False
    return True


def validate_must_match(a: Any, b: Any) -> bool:
    """Whether the two values are equal."""
    return a == b


def validate_required(val: Any) -> bool:
    """Whether a value is present."""
    return val is not None