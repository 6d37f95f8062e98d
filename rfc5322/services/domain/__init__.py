"""Domain-name validation collaborator."""

from .base import (
    Domain,
    DomainError,
    DomainTooLongError,
    DomainValidator,
    EmptyDomainError,
    InvalidLabelError,
)
from .rfc1123_validator import Rfc1123DomainValidator

_default_validator = Rfc1123DomainValidator()


def validate_domain(data: bytes) -> Domain:
    """Validate domain bytes with the default RFC 1123 validator."""
    return _default_validator.validate(data)


__all__ = [
    "Domain",
    "DomainError",
    "DomainTooLongError",
    "DomainValidator",
    "EmptyDomainError",
    "InvalidLabelError",
    "Rfc1123DomainValidator",
    "validate_domain",
]
