"""Abstract interfaces for byte-level serialization of grammar values."""

from abc import ABC, abstractmethod

from rfc5322.utils.ascii import decode_text, encode_text


class ByteSerializable(ABC):
    """
    A value with a canonical byte serialization.

    The byte form is the primitive; the text form is derived from it by
    UTF-8 decoding so there is a single rendering code path.
    """

    @abstractmethod
    def to_bytes(self) -> bytes:
        """
        Serialize to the canonical wire bytes.

        Returns:
            Wire representation
        """
        pass

    def __str__(self) -> str:
        return decode_text(self.to_bytes())


class ByteParseable(ByteSerializable):
    """
    A value that can also be parsed from its wire bytes.

    Subclasses implement parse_bytes; parse is a thin text wrapper that
    encodes and delegates so bytes and text share one validation path.
    """

    @classmethod
    @abstractmethod
    def parse_bytes(cls, data: bytes):
        """
        Parse a value from wire bytes.

        Args:
            data: Wire representation

        Returns:
            Parsed, validated instance

        Raises:
            RFC5322Error: Subclass specific to the grammar
        """
        pass

    @classmethod
    def parse(cls, value: str):
        """Parse a value from text."""
        return cls.parse_bytes(encode_text(value))
