"""Check that text holds no Unicode control characters."""

from __future__ import annotations

import unicodedata


def validate_non_control_character(text: str) -> bool:
    """Whether no character of the text is a control character (category Cc)."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return all(unicodedata.category(ch) != "Cc" for ch in text)