"""Validators for e-mail, URL, IP, length, range, contains, control characters
and credit cards, with structured validation error types."""

__version__ = "0.1.0"