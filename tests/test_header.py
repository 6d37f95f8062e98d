"""Tests for header names, values, fields and lists."""

import pytest

from rfc5322.models.errors import (
    EmptyHeaderNameError,
    HeaderError,
    InvalidFoldingError,
    InvalidHeaderFormatError,
    InvalidHeaderNameCharacterError,
    InvalidHeaderNameError,
    InvalidHeaderValueCharacterError,
    InvalidHeaderValueError,
)
from rfc5322.models.header import (
    CONTENT_TYPE,
    RECEIVED,
    SUBJECT,
    Header,
    HeaderList,
    HeaderName,
    HeaderValue,
    unfold,
)


class TestHeaderName:
    """Test field-name validation and case-insensitivity."""

    def test_case_insensitive(self):
        assert HeaderName("Content-Type") == HeaderName("content-type")
        assert hash(HeaderName("Content-Type")) == hash(HeaderName("content-type"))
        assert HeaderName("content-type") == CONTENT_TYPE

    def test_preserves_casing(self):
        name = HeaderName("content-TYPE")
        assert name.raw_value == "content-TYPE"
        assert str(name) == "content-TYPE"

    def test_usable_as_dict_key(self):
        counts = {HeaderName("Received"): 1}
        assert counts[HeaderName("RECEIVED")] == 1

    def test_empty(self):
        with pytest.raises(EmptyHeaderNameError):
            HeaderName("")

    def test_colon(self):
        with pytest.raises(InvalidHeaderNameCharacterError) as exc_info:
            HeaderName("Bad:Name")

        assert exc_info.value.byte == 0x3A
        assert exc_info.value.reason == "Field name cannot contain a colon"

    @pytest.mark.parametrize("value,byte", [("Bad Name", 0x20), ("Tab\tName", 0x09), ("Naïve", 0xC3)])
    def test_not_visible(self, value, byte):
        with pytest.raises(InvalidHeaderNameCharacterError) as exc_info:
            HeaderName(value)

        assert exc_info.value.byte == byte
        assert exc_info.value.reason == "Field name must be printable ASCII without spaces"


class TestHeaderValue:
    """Test unfolding and value validation."""

    def test_unfold_keeps_following_space(self):
        assert HeaderValue("text/html;\r\n charset=UTF-8").raw_value == "text/html; charset=UTF-8"

    def test_unfold_tab(self):
        assert unfold(b"a\r\n\tb") == b"a\tb"

    def test_multiple_folds(self):
        assert unfold(b"one\r\n two\r\n  three") == b"one two  three"

    def test_strips_leading_whitespace_only(self):
        assert HeaderValue(" \t hello  world ").raw_value == "hello  world "

    def test_empty(self):
        assert HeaderValue("").raw_value == ""

    @pytest.mark.parametrize("value", [b"a\r\nb", b"a\r\n"])
    def test_fold_without_whitespace(self, value):
        with pytest.raises(InvalidFoldingError):
            unfold(value)

    @pytest.mark.parametrize(
        "value,byte,reason",
        [
            (b"a\rb", 0x0D, "CR must be followed by LF"),
            (b"a\r", 0x0D, "CR must be followed by LF"),
            (b"a\nb", 0x0A, "LF must be preceded by CR"),
            (b"a\x00b", 0x00, "Control characters not allowed (except HTAB)"),
            (b"a\x7fb", 0x7F, "Control characters not allowed (except HTAB)"),
            ("é".encode("utf-8"), 0xC3, "Must be printable ASCII or HTAB"),
        ],
    )
    def test_invalid_characters(self, value, byte, reason):
        with pytest.raises(InvalidHeaderValueCharacterError) as exc_info:
            unfold(value)

        assert exc_info.value.byte == byte
        assert exc_info.value.reason == reason


class TestHeader:
    """Test "Name: value" parsing and rendering."""

    def test_parse(self):
        header = Header.parse("Subject: Hello")
        assert header.name == SUBJECT
        assert header.value.raw_value == "Hello"
        assert str(header) == "Subject: Hello"

    def test_parse_folded(self):
        header = Header.parse_bytes(b"Content-Type: text/html;\r\n charset=UTF-8")
        assert header.to_bytes() == b"Content-Type: text/html; charset=UTF-8"

    def test_parse_splits_on_first_colon(self):
        header = Header.parse("X-Time:10:30")
        assert header.value.raw_value == "10:30"
        assert str(header) == "X-Time: 10:30"

    def test_missing_colon(self):
        with pytest.raises(InvalidHeaderFormatError):
            Header.parse("NoColon")

    def test_invalid_name_wrapped(self):
        with pytest.raises(InvalidHeaderNameError) as exc_info:
            Header.parse(": value")

        assert isinstance(exc_info.value.error, EmptyHeaderNameError)
        assert exc_info.value.__cause__ is exc_info.value.error

    def test_invalid_value_wrapped(self):
        with pytest.raises(InvalidHeaderValueError) as exc_info:
            Header.parse("X-Test: a\rb")

        assert isinstance(exc_info.value.error, InvalidHeaderValueCharacterError)

    def test_of(self):
        assert str(Header.of("X-Priority", "1")) == "X-Priority: 1"
        assert Header.of(SUBJECT, HeaderValue("Hi")).name == HeaderName("subject")

    def test_of_wraps_errors(self):
        with pytest.raises(InvalidHeaderNameError):
            Header.of("Bad Name", "x")
        with pytest.raises(InvalidHeaderValueError):
            Header.of("X-Test", "a\nb")

    def test_errors_share_base(self):
        for value in ("NoColon", "Bad Name: x", "X: \x01"):
            with pytest.raises(HeaderError):
                Header.parse(value)


class TestHeaderList:
    """Test the ordered header collection."""

    @pytest.fixture
    def headers(self):
        return HeaderList(
            [
                Header.of("Received", "from a"),
                Header.of("Subject", "Hello"),
                Header.of("received", "from b"),
            ]
        )

    def test_iteration_keeps_order(self, headers):
        assert [str(h.name) for h in headers] == ["Received", "Subject", "received"]
        assert len(headers) == 3

    def test_get_case_insensitive(self, headers):
        assert headers.get("SUBJECT").raw_value == "Hello"
        assert headers.get(RECEIVED).raw_value == "from a"
        assert headers.get("Cc") is None
        assert "subject" in headers
        assert "Cc" not in headers

    def test_all_and_values(self, headers):
        assert len(headers.all("Received")) == 2
        assert headers.values("RECEIVED") == ["from a", "from b"]

    def test_set_replaces_all(self, headers):
        headers.set("Received", "from c")
        assert headers.values("Received") == ["from c"]
        assert [str(h.name) for h in headers] == ["Subject", "Received"]

    def test_remove(self, headers):
        headers.remove("received")
        assert len(headers) == 1
        assert "Received" not in headers

    def test_append_and_to_bytes(self):
        headers = HeaderList()
        headers.append(Header.of("X-A", "1"))
        headers.append(Header.of("X-B", "2"))
        assert headers.to_bytes() == b"X-A: 1\r\nX-B: 2\r\n"
        assert headers == HeaderList([Header.of("x-a", "1"), Header.of("X-B", "2")])
