"""Message assembly and serialization (RFC 5322 section 3.6)."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
from uuid import uuid4

from rfc5322.services.domain import Domain
from rfc5322.utils import ascii

from .base import ByteParseable, ByteSerializable
from .date_time import DateTime
from .email_address import EmailAddress
from .errors import (
    InvalidMessageFieldError,
    InvalidMessageIdCharacterError,
    MessageIdMissingAtSignError,
    MessageIdMultipleAtSignsError,
)
from .header import BCC, Header


@dataclass(frozen=True)
class MessageId(ByteParseable):
    """
    Message identifier, stored without angle brackets.

    Brackets are removed on construction when the value is wrapped in them
    and added back on serialization.

    Attributes:
        value: "unique@domain" content
    """

    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", _validate_message_id(ascii.encode_text(self.value)))

    @classmethod
    def parse_bytes(cls, data: bytes) -> "MessageId":
        return cls(ascii.decode_text(bytes(data)))

    @classmethod
    def for_domain(cls, unique_id: str, domain: Union[str, Domain]) -> "MessageId":
        """Build "unique_id@domain"."""
        name = domain.name if isinstance(domain, Domain) else domain
        return cls(f"{unique_id}@{name}")

    @classmethod
    def generate(cls, domain: Union[str, Domain]) -> "MessageId":
        """New random identifier under the given domain."""
        return cls.for_domain(uuid4().hex, domain)

    def to_bytes(self) -> bytes:
        return b"<" + self.value.encode("ascii") + b">"


def _validate_message_id(data: bytes) -> str:
    """
    Strip optional brackets and validate.

    Returns:
        Content between the brackets

    Raises:
        MessageIdMissingAtSignError: If there is no '@'
        MessageIdMultipleAtSignsError: If there is more than one '@'
        InvalidMessageIdCharacterError: For spaces or non-visible bytes
    """
    original = ascii.decode_text(data)
    if len(data) >= 2 and data[0] == ascii.LESS_THAN and data[-1] == ascii.GREATER_THAN:
        data = data[1:-1]

    at_count = data.count(b"@")
    if at_count == 0:
        raise MessageIdMissingAtSignError(original)
    if at_count > 1:
        raise MessageIdMultipleAtSignsError(original, at_count)

    for byte in data:
        if not ascii.is_visible(byte):
            raise InvalidMessageIdCharacterError(
                original, byte, "Must be printable ASCII without spaces"
            )

    return data.decode("ascii")


@dataclass(frozen=True)
class Message(ByteSerializable):
    """
    A complete message ready for serialization.

    Bcc recipients are carried for the caller's envelope but never
    written to the serialized form.

    Attributes:
        from_: Originator (From)
        to: Primary recipients (To)
        subject: Subject line
        date: Origination date (Date)
        message_id: Unique identifier (Message-ID)
        body: Raw body bytes, appended verbatim
        cc: Carbon-copy recipients (Cc), omitted when empty
        bcc: Blind carbon-copy recipients, never serialized
        reply_to: Reply-To address
        additional_headers: Extra fields, serialized in order
        mime_version: MIME-Version value
    """

    from_: EmailAddress
    to: Tuple[EmailAddress, ...]
    subject: str
    date: DateTime
    message_id: MessageId
    body: bytes = b""
    cc: Optional[Tuple[EmailAddress, ...]] = None
    bcc: Optional[Tuple[EmailAddress, ...]] = None
    reply_to: Optional[EmailAddress] = None
    additional_headers: Tuple[Header, ...] = field(default_factory=tuple)
    mime_version: str = "1.0"

    def __post_init__(self):
        """Freeze sequences to tuples and reject content that would leak into other fields."""
        object.__setattr__(self, "to", tuple(self.to))
        object.__setattr__(self, "additional_headers", tuple(self.additional_headers))
        if self.cc is not None:
            object.__setattr__(self, "cc", tuple(self.cc))
        if self.bcc is not None:
            object.__setattr__(self, "bcc", tuple(self.bcc))
        object.__setattr__(self, "body", bytes(self.body))

        for name, value in (("Subject", self.subject), ("MIME-Version", self.mime_version)):
            if "\r" in value or "\n" in value:
                raise InvalidMessageFieldError(name, "line breaks are not allowed")

        if any(header.name == BCC for header in self.additional_headers):
            raise InvalidMessageFieldError("Bcc", "blind recipients cannot be sent as a header")

    def to_bytes(self) -> bytes:
        """
        Serialize headers and body with CRLF line endings.

        Field order is From, To, Cc, Subject, Date, Message-ID, Reply-To,
        MIME-Version, then additional headers, a blank line and the body.
        """
        buffer = bytearray()

        def line(name: bytes, value: bytes) -> None:
            buffer.extend(name + b": " + value + ascii.CRLF)

        line(b"From", self.from_.to_bytes())
        line(b"To", _address_list(self.to))
        if self.cc:
            line(b"Cc", _address_list(self.cc))
        line(b"Subject", ascii.encode_text(self.subject))
        line(b"Date", self.date.to_bytes())
        line(b"Message-ID", self.message_id.to_bytes())
        if self.reply_to is not None:
            line(b"Reply-To", self.reply_to.to_bytes())
        line(b"MIME-Version", ascii.encode_text(self.mime_version))

        for header in self.additional_headers:
            buffer.extend(header.to_bytes() + ascii.CRLF)

        buffer.extend(ascii.CRLF)
        buffer.extend(self.body)

        return bytes(buffer)

    @property
    def recipients(self) -> Tuple[EmailAddress, ...]:
        """Every envelope recipient: To, Cc and Bcc."""
        return self.to + (self.cc or ()) + (self.bcc or ())


def _address_list(addresses: Tuple[EmailAddress, ...]) -> bytes:
    return b", ".join(address.to_bytes() for address in addresses)
