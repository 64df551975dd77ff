"""Domain exceptions.

Raised by domain objects when a business rule or invariant would be
violated. They deliberately do not derive from ``ValueError`` so that
pydantic lets them propagate unchanged instead of folding them into a
``ValidationError``.
"""
from typing import Any


class DomainError(Exception):
    """Base class for all domain rule violations."""


class OutOfRangeError(DomainError):
    """A field value lies outside its legal range.

    Attributes:
        field: Name of the offending field
        value: The rejected value
        minimum: Inclusive lower bound
        maximum: Inclusive upper bound
    """

    def __init__(self, field: str, value: Any, minimum: float, maximum: float):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{field} must be between {minimum} and {maximum}, got {value}"
        )
