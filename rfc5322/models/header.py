"""
Header fields (RFC 5322 sections 2.2 and 3.6.8).

A field is a case-insensitive name, a colon and an unfolded value:

    field-name = 1*ftext
    ftext      = %d33-57 / %d59-126
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Union

from rfc5322.utils import ascii

from .base import ByteParseable
from .errors import (
    EmptyHeaderNameError,
    HeaderNameError,
    HeaderValueError,
    InvalidFoldingError,
    InvalidHeaderFormatError,
    InvalidHeaderNameCharacterError,
    InvalidHeaderNameError,
    InvalidHeaderValueCharacterError,
    InvalidHeaderValueError,
)


@dataclass(frozen=True, eq=False)
class HeaderName(ByteParseable):
    """
    Header field name.

    The original casing is kept for display; comparison and hashing
    ignore case.
    """

    raw_value: str

    def __post_init__(self):
        data = ascii.encode_text(self.raw_value)
        if not data:
            raise EmptyHeaderNameError()

        for byte in data:
            if byte == ascii.COLON:
                raise InvalidHeaderNameCharacterError(self.raw_value, byte, "Field name cannot contain a colon")
            if not ascii.is_visible(byte):
                raise InvalidHeaderNameCharacterError(
                    self.raw_value, byte, "Field name must be printable ASCII without spaces"
                )

    def __eq__(self, other):
        if not isinstance(other, HeaderName):
            return NotImplemented
        return self.raw_value.lower() == other.raw_value.lower()

    def __hash__(self):
        return hash(self.raw_value.lower())

    @classmethod
    def parse_bytes(cls, data: bytes) -> "HeaderName":
        return cls(ascii.decode_text(bytes(data)))

    def to_bytes(self) -> bytes:
        return self.raw_value.encode("ascii")


@dataclass(frozen=True)
class HeaderValue(ByteParseable):
    """
    Unfolded header field body.

    Construction unfolds CRLF+WSP sequences, strips leading blanks and
    checks that only printable ASCII and HTAB remain, so raw_value never
    holds a line break.
    """

    raw_value: str

    def __post_init__(self):
        unfolded = unfold(ascii.encode_text(self.raw_value))
        object.__setattr__(self, "raw_value", unfolded.decode("ascii"))

    @classmethod
    def parse_bytes(cls, data: bytes) -> "HeaderValue":
        return cls(ascii.decode_text(bytes(data)))

    def to_bytes(self) -> bytes:
        return self.raw_value.encode("ascii")


def unfold(data: bytes) -> bytes:
    """
    Unfold and validate a header field body.

    CRLF followed by SP or HTAB is removed and the blank kept. Leading
    SP/HTAB is then stripped; trailing and inner blanks are preserved.

    Args:
        data: Field body as it appeared after the colon

    Returns:
        Unfolded ASCII bytes

    Raises:
        InvalidFoldingError: If CRLF is not followed by SP or HTAB
        InvalidHeaderValueCharacterError: For bare CR/LF or a disallowed byte
    """
    value = ascii.decode_text(data)
    unfolded = bytearray()
    index = 0
    length = len(data)

    while index < length:
        byte = data[index]

        if byte == ascii.CR:
            if index + 1 >= length or data[index + 1] != ascii.LF:
                raise InvalidHeaderValueCharacterError(value, byte, "CR must be followed by LF")
            if index + 2 >= length or data[index + 2] not in ascii.WSP:
                raise InvalidFoldingError(
                    value, byte, "CRLF must be followed by WSP (space or tab) for folding"
                )
            # Drop CRLF, keep the blank that follows
            index += 2
            continue

        if byte == ascii.LF:
            raise InvalidHeaderValueCharacterError(value, byte, "LF must be preceded by CR")

        unfolded.append(byte)
        index += 1

    trimmed = bytes(unfolded).lstrip(b" \t")

    for byte in trimmed:
        if ascii.is_printable(byte) or byte == ascii.HTAB:
            continue
        if ascii.is_control(byte):
            reason = "Control characters not allowed (except HTAB)"
        else:
            reason = "Must be printable ASCII or HTAB"
        raise InvalidHeaderValueCharacterError(ascii.decode_text(trimmed), byte, reason)

    return trimmed


@dataclass(frozen=True)
class Header(ByteParseable):
    """
    A header field: name and value.

    Serialized as "Name: Value"; values are never folded on output.
    """

    name: HeaderName
    value: HeaderValue

    @classmethod
    def of(cls, name: Union[str, HeaderName], value: Union[str, HeaderValue]) -> "Header":
        """
        Build a header from plain strings.

        Raises:
            InvalidHeaderNameError: Wrapping the name error
            InvalidHeaderValueError: Wrapping the value error
        """
        try:
            header_name = name if isinstance(name, HeaderName) else HeaderName(name)
        except HeaderNameError as e:
            raise InvalidHeaderNameError(e) from e

        try:
            header_value = value if isinstance(value, HeaderValue) else HeaderValue(value)
        except HeaderValueError as e:
            raise InvalidHeaderValueError(e) from e

        return cls(header_name, header_value)

    @classmethod
    def parse_bytes(cls, data: bytes) -> "Header":
        """
        Parse a "Name: value" field, possibly folded.

        Raises:
            InvalidHeaderFormatError: If there is no colon
            InvalidHeaderNameError: Wrapping the name error
            InvalidHeaderValueError: Wrapping the value error
        """
        data = bytes(data)
        colon = data.find(b":")
        if colon < 0:
            raise InvalidHeaderFormatError(ascii.decode_text(data), "missing colon separator")

        try:
            name = HeaderName.parse_bytes(data[:colon])
        except HeaderNameError as e:
            raise InvalidHeaderNameError(e) from e

        try:
            value = HeaderValue.parse_bytes(data[colon + 1 :])
        except HeaderValueError as e:
            raise InvalidHeaderValueError(e) from e

        return cls(name, value)

    def to_bytes(self) -> bytes:
        return self.name.to_bytes() + b": " + self.value.to_bytes()


class HeaderList:
    """
    Ordered collection of header fields with case-insensitive lookup.

    Insertion order is preserved; several fields may share a name.
    """

    def __init__(self, headers: Optional[Iterable[Header]] = None):
        self._headers: List[Header] = list(headers or [])

    def __iter__(self) -> Iterator[Header]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, name) -> bool:
        return self.get(name) is not None

    def __eq__(self, other):
        if not isinstance(other, HeaderList):
            return NotImplemented
        return self._headers == other._headers

    def __repr__(self) -> str:
        return f"HeaderList({self._headers!r})"

    def append(self, header: Header) -> None:
        self._headers.append(header)

    def get(self, name: Union[str, HeaderName]) -> Optional[HeaderValue]:
        """Value of the first field with this name, or None."""
        key = _as_name(name)
        for header in self._headers:
            if header.name == key:
                return header.value
        return None

    def set(self, name: Union[str, HeaderName], value: Union[str, HeaderValue]) -> None:
        """Replace every field with this name by a single new one at the end."""
        header = Header.of(name, value)
        self.remove(header.name)
        self._headers.append(header)

    def remove(self, name: Union[str, HeaderName]) -> None:
        key = _as_name(name)
        self._headers = [header for header in self._headers if header.name != key]

    def all(self, name: Union[str, HeaderName]) -> List[Header]:
        """Every field with this name, e.g. repeated Received fields."""
        key = _as_name(name)
        return [header for header in self._headers if header.name == key]

    def values(self, name: Union[str, HeaderName]) -> List[str]:
        return [header.value.raw_value for header in self.all(name)]

    def to_bytes(self) -> bytes:
        """Each field followed by CRLF."""
        return b"".join(header.to_bytes() + ascii.CRLF for header in self._headers)


def _as_name(name: Union[str, HeaderName]) -> HeaderName:
    return name if isinstance(name, HeaderName) else HeaderName(name)


# RFC 5322 fields
FROM = HeaderName("From")
TO = HeaderName("To")
CC = HeaderName("Cc")
BCC = HeaderName("Bcc")
SUBJECT = HeaderName("Subject")
DATE = HeaderName("Date")
MESSAGE_ID = HeaderName("Message-ID")
REPLY_TO = HeaderName("Reply-To")
SENDER = HeaderName("Sender")
IN_REPLY_TO = HeaderName("In-Reply-To")
REFERENCES = HeaderName("References")
RESENT_FROM = HeaderName("Resent-From")
RESENT_TO = HeaderName("Resent-To")
RESENT_DATE = HeaderName("Resent-Date")
RESENT_MESSAGE_ID = HeaderName("Resent-Message-ID")
RETURN_PATH = HeaderName("Return-Path")
RECEIVED = HeaderName("Received")

# MIME fields (RFC 2045)
MIME_VERSION = HeaderName("MIME-Version")
CONTENT_TYPE = HeaderName("Content-Type")
CONTENT_TRANSFER_ENCODING = HeaderName("Content-Transfer-Encoding")
CONTENT_DISPOSITION = HeaderName("Content-Disposition")
CONTENT_ID = HeaderName("Content-ID")
CONTENT_DESCRIPTION = HeaderName("Content-Description")

# Common extension fields
X_MAILER = HeaderName("X-Mailer")
X_PRIORITY = HeaderName("X-Priority")
LIST_UNSUBSCRIBE = HeaderName("List-Unsubscribe")
LIST_ID = HeaderName("List-ID")
PRECEDENCE = HeaderName("Precedence")
AUTO_SUBMITTED = HeaderName("Auto-Submitted")
