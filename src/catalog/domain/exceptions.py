"""Domain-level exceptions.

All catalog errors are expressed as subclasses of DomainException so the
HTTP and CLI layers can catch them uniformly and translate them into a
status code or a user-friendly message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """One or more product constraints were violated.

    Carries every violation found, not just the first one.
    """

    def __init__(self, violations: list[str] | str) -> None:
        if isinstance(violations, str):
            violations = [violations]
        self.violations = list(violations)
        super().__init__(f"Validation errors: {', '.join(self.violations)}")


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is no longer active)."""


class StorageError(DomainException):
    """The catalog file could not be written."""
