"""Exceptions raised by the job posting builder."""

from __future__ import annotations


class ValidationError(ValueError):
    """A required attribute is missing, has the wrong type, or is badly formatted.

    Only the first failing field is reported.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Validation failed: {field}: {reason}")


class MissingKeyError(KeyError):
    """A caller-supplied mapping lacks a key the setter needs."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"missing required key: {self.key!r}"
