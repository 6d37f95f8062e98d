"""Email address (RFC 5322 section 3.4)."""

from dataclasses import dataclass
from typing import Optional, Tuple

from rfc5322.services.domain import Domain, DomainError, DomainValidator, validate_domain
from rfc5322.utils import ascii

from .base import ByteParseable
from .errors import (
    InvalidDisplayNameError,
    InvalidDomainError,
    InvalidLocalPartError,
    LocalPartError,
    MissingAtSignError,
)
from .local_part import LocalPart


@dataclass(frozen=True)
class EmailAddress(ByteParseable):
    """
    Mailbox with an optional display name.

    Attributes:
        display_name: Name shown to users, trimmed; None if absent
        local_part: Part before '@'
        domain: Part after '@'
    """

    display_name: Optional[str]
    local_part: LocalPart
    domain: Domain

    def __post_init__(self):
        """Trim the display name and reject line breaks in it."""
        if self.display_name is None:
            return

        name = self.display_name.strip(" \t\r\n")
        if "\r" in name or "\n" in name:
            raise InvalidDisplayNameError(self.display_name, "line breaks are not allowed")

        object.__setattr__(self, "display_name", name or None)

    @property
    def address(self) -> str:
        """The bare address, local@domain."""
        return f"{self.local_part}@{self.domain.name}"

    # ------------------------------------------------------------------
    # Wire format

    def to_bytes(self) -> bytes:
        """
        Render as "name <local@domain>" or "local@domain".

        Display names containing anything other than ASCII letters, digits
        and blanks are quoted, with '"' and '\\' escaped.
        """
        addr_spec = self.local_part.to_bytes() + b"@" + self.domain.to_bytes()
        if self.display_name is None:
            return addr_spec

        name = self.display_name
        if _needs_quoting(name):
            name = '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'

        return ascii.encode_text(name) + b" <" + addr_spec + b">"

    @classmethod
    def parse(cls, value: str, domain_validator: Optional[DomainValidator] = None) -> "EmailAddress":
        return cls.parse_bytes(ascii.encode_text(value), domain_validator)

    @classmethod
    def parse_bytes(
        cls, data: bytes, domain_validator: Optional[DomainValidator] = None
    ) -> "EmailAddress":
        """
        Parse "Display Name <local@domain>", "<local@domain>" or "local@domain".

        Args:
            data: Address bytes
            domain_validator: Validator for the domain; RFC 1123 by default

        Returns:
            Parsed EmailAddress

        Raises:
            MissingAtSignError: If there is no '@' separator
            InvalidDisplayNameError: If a quoted display name is unterminated
            InvalidLocalPartError: Wrapping the local-part error
            InvalidDomainError: Wrapping the domain validator error
        """
        data = bytes(data)
        display_name = None

        brackets = _find_brackets(data)
        if brackets is not None:
            lt, gt = brackets
            display_name = _parse_display_name(data[:lt])
            addr_spec = data[lt + 1 : gt]
        else:
            addr_spec = data

        at = _find_unquoted(addr_spec, ascii.AT_SIGN)
        if at < 0:
            raise MissingAtSignError()

        local_part = _parse_local_part(addr_spec[:at])
        domain = _parse_domain(addr_spec[at + 1 :], domain_validator)

        return cls(display_name, local_part, domain)


def _needs_quoting(name: str) -> bool:
    for char in name:
        if not char.isascii():
            return True
        if not (char.isalnum() or char in " \t"):
            return True
    return False


def _quoted_end(data: bytes, start: int) -> int:
    """Index just past the quoted segment opening at start, or -1 if unterminated."""
    index = start + 1
    while index < len(data):
        byte = data[index]
        if byte == ascii.BACKSLASH:
            index += 2
            continue
        if byte == ascii.DQUOTE:
            return index + 1
        index += 1
    return -1


def _find_unquoted(data: bytes, target: int) -> int:
    """
    Index of the first target byte, skipping a leading quoted segment.

    Only a quote at the start of the segment (after blanks) opens a quoted
    string; a stray quote elsewhere is an ordinary byte, so the grammar that
    owns it reports the error.
    """
    start = len(data) - len(data.lstrip(b" \t"))
    if start < len(data) and data[start] == ascii.DQUOTE:
        end = _quoted_end(data, start)
        if end >= 0:
            return data.find(bytes((target,)), end)
    return data.find(bytes((target,)))


def _find_brackets(data: bytes) -> Optional[Tuple[int, int]]:
    """Locate the angle-addr brackets, if the full form is used."""
    lt = _find_unquoted(data, ascii.LESS_THAN)
    if lt < 0:
        return None
    gt = data.rfind(b">")
    if gt <= lt:
        return None
    return lt, gt


def _parse_display_name(data: bytes) -> Optional[str]:
    trimmed = ascii.strip_wsp(data)
    if not trimmed:
        return None

    name = ascii.decode_text(trimmed)
    if trimmed[0] == ascii.DQUOTE:
        end = _quoted_end(trimmed, 0)
        if end < 0:
            raise InvalidDisplayNameError(name, "unterminated quoted string")
        if end == len(trimmed):
            name = _unescape(name[1:-1])
    return name


def _unescape(value: str) -> str:
    """Resolve quoted-pairs: \\" becomes " and \\\\ becomes \\."""
    result = []
    chars = iter(value)
    for char in chars:
        if char == "\\":
            result.append(next(chars, "\\"))
        else:
            result.append(char)
    return "".join(result)


def _parse_local_part(data: bytes) -> LocalPart:
    try:
        return LocalPart.parse_bytes(data)
    except LocalPartError as e:
        raise InvalidLocalPartError(e) from e


def _parse_domain(data: bytes, validator: Optional[DomainValidator]) -> Domain:
    try:
        if validator is None:
            return validate_domain(data)
        return validator.validate(data)
    except DomainError as e:
        raise InvalidDomainError(e) from e
