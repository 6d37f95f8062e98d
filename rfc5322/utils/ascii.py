"""US-ASCII byte classes shared by the RFC 5322 grammars."""

HTAB = 0x09
LF = 0x0A
CR = 0x0D
SP = 0x20
DQUOTE = 0x22
PERIOD = 0x2E
COLON = 0x3A
LESS_THAN = 0x3C
GREATER_THAN = 0x3E
AT_SIGN = 0x40
BACKSLASH = 0x5C

CRLF = b"\r\n"

# atext symbols, RFC 5322 section 3.2.3
ATEXT_SYMBOLS = frozenset(b"!#$%&'*+-/=?^_`{|}~")

WSP = frozenset((SP, HTAB))


def is_alpha(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def is_ascii(byte: int) -> bool:
    return byte <= 0x7F


def is_visible(byte: int) -> bool:
    """VCHAR: 0x21-0x7E."""
    return 0x21 <= byte <= 0x7E


def is_printable(byte: int) -> bool:
    """Visible characters plus SP: 0x20-0x7E."""
    return 0x20 <= byte <= 0x7E


def is_control(byte: int) -> bool:
    return byte < 0x20 or byte == 0x7F


def is_wsp(byte: int) -> bool:
    return byte in WSP


def is_atext(byte: int) -> bool:
    return is_alpha(byte) or is_digit(byte) or byte in ATEXT_SYMBOLS


def strip_wsp(data: bytes) -> bytes:
    """Strip SP and HTAB from both ends."""
    return data.strip(b" \t")


def encode_text(value: str) -> bytes:
    """
    Encode text to the byte form the grammars operate on.

    Uses surrogateescape so bytes decoded with decode_text round-trip
    exactly, including invalid UTF-8.
    """
    return value.encode("utf-8", errors="surrogateescape")


def decode_text(data: bytes) -> str:
    """Decode bytes produced by a grammar back to text."""
    return data.decode("utf-8", errors="surrogateescape")


def describe_byte(byte: int) -> str:
    """Human-readable form of a byte for error messages."""
    if is_visible(byte):
        return f"'{chr(byte)}' (0x{byte:02X})"
    return f"0x{byte:02X}"
