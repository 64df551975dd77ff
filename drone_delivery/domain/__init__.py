"""Domain layer - Business entities and value objects.

This package contains the core domain models and business rules
that are independent of external frameworks and infrastructure.
"""
from drone_delivery.domain.exceptions import DomainError, OutOfRangeError
from drone_delivery.domain.location import Location
from drone_delivery.domain.value_object import ValueObject

__all__ = [
    "DomainError",
    "Location",
    "OutOfRangeError",
    "ValueObject",
]
