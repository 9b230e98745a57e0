"""
Exceptions for the precast calculators.

    PrecastError (base)
    └── InvalidInputError - a dimension, quantity or unit could not be used

InvalidInputError is recoverable: the caller keeps (or clears) its result
and waits for corrected input. It also subclasses ValueError so plain
`except ValueError` callers keep working.
"""

from typing import Any, Dict, Optional


class PrecastError(Exception):
    """Base exception for all precast calculator errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(PrecastError, ValueError):
    """A required input is missing, non-numeric, negative or in an unknown unit."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value
