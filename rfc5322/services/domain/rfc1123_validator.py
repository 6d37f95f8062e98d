"""RFC 1123 host name validation."""

import logging

from .base import Domain, DomainTooLongError, DomainValidator, EmptyDomainError, InvalidLabelError

logger = logging.getLogger(__name__)


class Rfc1123DomainValidator(DomainValidator):
    """
    Validate domains against RFC 1123 section 2.1 host name syntax.

    Labels are 1-63 letters, digits or hyphens, neither starting nor
    ending with a hyphen; leading digits are allowed. The whole name is at
    most 253 bytes.
    """

    MAX_LENGTH = 253
    MAX_LABEL_LENGTH = 63

    def validate(self, data: bytes) -> Domain:
        if not data:
            raise EmptyDomainError()

        if len(data) > self.MAX_LENGTH:
            logger.debug("Rejected domain of %d bytes", len(data))
            raise DomainTooLongError(len(data), self.MAX_LENGTH)

        try:
            name = data.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidLabelError(data.decode("utf-8", errors="replace"), "must be ASCII") from e

        for label in name.split("."):
            self._validate_label(label)

        return Domain(name)

    def _validate_label(self, label: str) -> None:
        """
        Check a single label.

        Raises:
            InvalidLabelError: If the label is empty, too long or malformed
        """
        if not label:
            raise InvalidLabelError(label, "empty label")
        if len(label) > self.MAX_LABEL_LENGTH:
            raise InvalidLabelError(label, f"longer than {self.MAX_LABEL_LENGTH} characters")
        if label.startswith("-") or label.endswith("-"):
            raise InvalidLabelError(label, "cannot start or end with a hyphen")

        for char in label:
            if not (char.isascii() and (char.isalnum() or char == "-")):
                raise InvalidLabelError(label, f"invalid character {char!r}")
