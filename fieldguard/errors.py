"""Validation error types and their human-readable rendering."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

# What a field maps to: a list of field errors, the errors of a nested
# object, or the errors of nested objects keyed by their index.
ErrorsKind = Union[list, "ValidationErrors", dict]

_ADD_TO_NON_FIELD = (
    "Attempt to add field validation to a non-Field ValidationErrorsKind instance"
)
_REPLACE_ENTRY = "Attempt to replace non-empty ValidationErrors entry"


class ValidationError(Exception):
    """A single failed check on a field, identified by a code."""

    def __init__(
        self,
        code: str,
        message: Optional[str] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(code)
        self.code = code
        self.message = message
        self.params: dict[str, Any] = dict(params) if params else {}

    def add_param(self, name: str, val: Any) -> None:
        """Attach a named parameter describing the failure."""
        self.params[name] = val

    def __str__(self) -> str:
        if self.message is not None:
            return str(self.message)
        return f"Validation error: {self.code} [{self.params!r}]"

    def __repr__(self) -> str:
        return (
            f"ValidationError(code={self.code!r}, message={self.message!r}, "
            f"params={self.params!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (
            self.code == other.code
            and self.message == other.message
            and self.params == other.params
        )

    __hash__ = None  # type: ignore[assignment]


class ValidationErrors(Exception):
    """All errors found while validating an object, keyed by field name.

    A field maps to a list of ``ValidationError`` (errors on the field itself),
    to another ``ValidationErrors`` (errors of a nested object), or to a dict
    from index to ``ValidationErrors`` (errors of nested objects in a collection).

    Validation outcomes are passed around as ``None`` (success) or an instance
    of this class (failure).
    """

    def __init__(self) -> None:
        super().__init__("Validation failed")
        self._errors: dict[str, ErrorsKind] = {}

    @staticmethod
    def has_error(result: Optional["ValidationErrors"], field: str) -> bool:
        """Tell whether an outcome holds errors for the given field."""
        return result is not None and field in result._errors

    @staticmethod
    def merge(
        parent: Optional["ValidationErrors"],
        field: str,
        child: Optional["ValidationErrors"],
    ) -> Optional["ValidationErrors"]:
        """Combine a parent outcome with the nested outcome of one field."""
        if child is None:
            return parent
        errors = parent if parent is not None else ValidationErrors()
        errors._add_nested(field, child)
        return errors

    @staticmethod
    def merge_all(
        parent: Optional["ValidationErrors"],
        field: str,
        children: Iterable[Optional["ValidationErrors"]],
    ) -> Optional["ValidationErrors"]:
        """Combine a parent outcome with the outcomes of a collection field.

        Each child outcome is expected to carry its errors under ``field``,
        as produced by :meth:`merge`.
        """
        nested: dict[int, ValidationErrors] = {}
        for index, outcome in enumerate(children):
            if outcome is None:
                continue
            entry = outcome._errors.pop(field, None)
            if isinstance(entry, ValidationErrors):
                nested[index] = entry
        if not nested:
            return parent
        errors = parent if parent is not None else ValidationErrors()
        errors._add_nested(field, nested)
        return errors

    def errors(self) -> dict[str, ErrorsKind]:
        """The map of field names to their errors, nested ones included."""
        return self._errors

    def field_errors(self) -> dict[str, list[ValidationError]]:
        """Only the errors found on the fields of this object itself."""
        return {
            name: kind for name, kind in self._errors.items() if isinstance(kind, list)
        }

    def add(self, field: str, error: ValidationError) -> None:
        """Record an error on a field of this object."""
        kind = self._errors.setdefault(field, [])
        if not isinstance(kind, list):
            raise TypeError(_ADD_TO_NON_FIELD)
        kind.append(error)

    def is_empty(self) -> bool:
        return not self._errors

    def _add_nested(self, field: str, errors: ErrorsKind) -> None:
        if field in self._errors:
            raise ValueError(_REPLACE_ENTRY)
        self._errors[field] = errors

    def __str__(self) -> str:
        return "\n".join(_render(kind, name) for name, kind in self._errors.items())

    def __repr__(self) -> str:
        return f"ValidationErrors({self._errors!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]


def _render_struct(errors: ValidationErrors, path: str) -> str:
    return "".join(
        _render(kind, f"{path}.{name}") for name, kind in errors.errors().items()
    )


def _render(kind: ErrorsKind, path: str) -> str:
    if isinstance(kind, list):
        return f"{path}: " + ", ".join(str(err) for err in kind)
    if isinstance(kind, ValidationErrors):
        return _render_struct(kind, path)
    return "".join(
        _render_struct(errs, f"{path}[{index}]") for index, errs in sorted(kind.items())
    )