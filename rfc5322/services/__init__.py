"""Collaborating services: domain validation and message composition.

The composer is imported from rfc5322.services.composer directly; the
models depend on the domain service and must be able to import it alone.
"""

from .domain import Domain, DomainError, DomainValidator, Rfc1123DomainValidator, validate_domain

__all__ = [
    "Domain",
    "DomainError",
    "DomainValidator",
    "Rfc1123DomainValidator",
    "validate_domain",
]
