"""Interface for the domain-name validator consumed by address parsing."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class DomainError(Exception):
    """Base exception for domain validation errors."""

    pass


class EmptyDomainError(DomainError):
    """Raised when the domain is empty."""

    def __init__(self):
        super().__init__("Domain cannot be empty")


class DomainTooLongError(DomainError):
    """Raised when the domain exceeds the total length limit."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Domain is {length} bytes, maximum is {limit}")


class InvalidLabelError(DomainError):
    """Raised when one dot-separated label is malformed."""

    def __init__(self, label: str, reason: str):
        self.label = label
        self.reason = reason
        super().__init__(f"Invalid domain label {label!r}: {reason}")


@dataclass(frozen=True, eq=False)
class Domain:
    """
    A validated domain name.

    Attributes:
        name: Canonical name, rendered verbatim in addresses
    """

    name: str

    def __eq__(self, other):
        if not isinstance(other, Domain):
            return NotImplemented
        return self.name.lower() == other.name.lower()

    def __hash__(self):
        return hash(self.name.lower())

    def __str__(self) -> str:
        return self.name

    def to_bytes(self) -> bytes:
        return self.name.encode("ascii")


class DomainValidator(ABC):
    """
    Abstract interface for domain-name validation.

    Address parsing delegates the domain grammar to an implementation of
    this interface so the syntax rules can be swapped.
    """

    @abstractmethod
    def validate(self, data: bytes) -> Domain:
        """
        Validate a domain from its byte form.

        Args:
            data: Domain bytes as they appear after '@'

        Returns:
            Validated Domain

        Raises:
            DomainError: If the bytes are not a valid domain
        """
        pass
