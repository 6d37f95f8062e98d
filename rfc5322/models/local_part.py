"""Address local-part (RFC 5322 section 3.4.1)."""

from dataclasses import dataclass, field
from enum import Enum

from rfc5322.utils import ascii

from .base import ByteParseable
from .errors import (
    ConsecutiveDotsError,
    InvalidDotAtomError,
    InvalidQuotedStringError,
    LeadingOrTrailingDotError,
    LocalPartTooLongError,
    NonAsciiLocalPartError,
)

MAX_LENGTH = 64


class LocalPartKind(Enum):
    """Which local-part form the bytes use."""

    DOT_ATOM = "dot_atom"
    QUOTED = "quoted"


@dataclass(frozen=True)
class LocalPart(ByteParseable):
    """
    Validated local-part, stored as its exact wire bytes.

    Attributes:
        raw: ASCII bytes; for quoted local-parts this includes the quotes
        kind: Dot-atom or quoted-string, derived from raw
    """

    raw: bytes
    kind: LocalPartKind = field(init=False, compare=False)

    def __post_init__(self):
        """Validate raw and derive kind."""
        object.__setattr__(self, "kind", _validate(self.raw))

    @classmethod
    def parse_bytes(cls, data: bytes) -> "LocalPart":
        return cls(bytes(data))

    def to_bytes(self) -> bytes:
        return self.raw

    @property
    def is_quoted(self) -> bool:
        return self.kind is LocalPartKind.QUOTED


def _validate(data: bytes) -> LocalPartKind:
    """
    Validate local-part bytes.

    Returns:
        The form the bytes take

    Raises:
        LocalPartError: Subclass naming the violated rule
    """
    if len(data) > MAX_LENGTH:
        raise LocalPartTooLongError(len(data))

    for byte in data:
        if not ascii.is_ascii(byte):
            raise NonAsciiLocalPartError(byte)

    if len(data) >= 2 and data[0] == ascii.DQUOTE and data[-1] == ascii.DQUOTE:
        _validate_quoted(data[1:-1])
        return LocalPartKind.QUOTED

    _validate_dot_atom(data)
    return LocalPartKind.DOT_ATOM


def _validate_quoted(content: bytes) -> None:
    # qcontent / quoted-pair, quoted-pair limited to \" and \\
    index = 0
    while index < len(content):
        byte = content[index]
        if byte == ascii.BACKSLASH:
            if index + 1 >= len(content):
                raise InvalidQuotedStringError("trailing backslash")
            escaped = content[index + 1]
            if escaped not in (ascii.DQUOTE, ascii.BACKSLASH):
                raise InvalidQuotedStringError(
                    f"backslash must escape '\"' or '\\\\', not {ascii.describe_byte(escaped)}"
                )
            index += 2
            continue

        if byte == ascii.DQUOTE:
            raise InvalidQuotedStringError("unescaped quote")
        if byte in (ascii.CR, ascii.LF):
            raise InvalidQuotedStringError("bare CR or LF")
        if not (ascii.is_printable(byte) or byte == ascii.HTAB):
            raise InvalidQuotedStringError(f"non-printable {ascii.describe_byte(byte)}")
        index += 1


def _validate_dot_atom(data: bytes) -> None:
    if not data:
        raise InvalidDotAtomError()
    if data[0] == ascii.PERIOD or data[-1] == ascii.PERIOD:
        raise LeadingOrTrailingDotError()
    if b".." in data:
        raise ConsecutiveDotsError()

    for byte in data:
        if not (ascii.is_atext(byte) or byte == ascii.PERIOD):
            raise InvalidDotAtomError(byte)
