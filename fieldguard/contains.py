"""Checks that a value holds, or does not hold, a given element."""

from __future__ import annotations

from typing import Any

from fieldguard.traits import has_element


def validate_contains(val: Any, needle: str) -> bool:
    """Whether text contains ``needle`` or a mapping has it as a key."""
    return has_element(val, needle)


def validate_does_not_contain(val: Any, needle: str) -> bool:
    """Whether text lacks ``needle`` or a mapping lacks it as a key."""
    return not has_element(val, needle)