"""
Error hierarchies for the RFC 5322 grammars.

Each grammar owns a closed set of exception classes rooted at its own base
class. Composite grammars wrap the child error (kept on ``error`` and chained
as ``__cause__``) instead of flattening it.
"""

from typing import Optional

from rfc5322.utils.ascii import describe_byte


class RFC5322Error(Exception):
    """Base exception for all RFC 5322 grammar errors."""

    pass


# --------------------------------------------------------------------------
# Date components


class DateComponentsError(RFC5322Error):
    """Raised when calendar components are out of range."""

    pass


class MonthOutOfRangeError(DateComponentsError):
    def __init__(self, month: int):
        self.month = month
        super().__init__(f"Month {month} out of range (1-12)")


class DayOutOfRangeError(DateComponentsError):
    def __init__(self, day: int, month: int, year: int):
        self.day = day
        self.month = month
        self.year = year
        super().__init__(f"Day {day} out of range for {year}-{month:02d}")


class HourOutOfRangeError(DateComponentsError):
    def __init__(self, hour: int):
        self.hour = hour
        super().__init__(f"Hour {hour} out of range (0-23)")


class MinuteOutOfRangeError(DateComponentsError):
    def __init__(self, minute: int):
        self.minute = minute
        super().__init__(f"Minute {minute} out of range (0-59)")


class SecondOutOfRangeError(DateComponentsError):
    def __init__(self, second: int):
        self.second = second
        super().__init__(f"Second {second} out of range (0-60)")


class WeekdayOutOfRangeError(DateComponentsError):
    def __init__(self, weekday: int):
        self.weekday = weekday
        super().__init__(f"Weekday {weekday} out of range (0-6)")


# --------------------------------------------------------------------------
# Date-time string grammar


class DateTimeError(RFC5322Error):
    """Raised when an RFC 5322 date-time string cannot be parsed."""

    pass


class _DateTokenError(DateTimeError):
    """A single token of the date-time string is invalid."""

    field = "token"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid {self.field}: {value!r}")


class InvalidDateFormatError(DateTimeError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid date-time format: {detail}")


class InvalidDayNameError(_DateTokenError):
    field = "day name"


class InvalidDayError(_DateTokenError):
    field = "day"


class InvalidMonthError(_DateTokenError):
    field = "month"


class InvalidYearError(_DateTokenError):
    field = "year"


class InvalidTimeError(_DateTokenError):
    field = "time of day"


class InvalidHourError(_DateTokenError):
    field = "hour"


class InvalidMinuteError(_DateTokenError):
    field = "minute"


class InvalidSecondError(_DateTokenError):
    field = "second"


class InvalidTimezoneError(_DateTokenError):
    field = "timezone"


class InvalidEpochSecondsError(DateTimeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Epoch seconds must be an integer, got {value!r}")


class InvalidTimezoneOffsetError(DateTimeError):
    def __init__(self, offset, reason: str):
        self.offset = offset
        self.reason = reason
        super().__init__(f"Invalid timezone offset {offset!r}: {reason}")


class WeekdayMismatchError(DateTimeError):
    """Day name disagrees with the weekday of the calendar date."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Day name {expected!r} does not match date, which is a {actual!r}")


class InvalidDateComponentsError(DateTimeError):
    """Parsed fields do not form a valid calendar date."""

    def __init__(self, error: DateComponentsError):
        self.error = error
        super().__init__(f"Invalid date components: {error}")


# --------------------------------------------------------------------------
# Local-part


class LocalPartError(RFC5322Error):
    """Raised when an address local-part violates RFC 5322."""

    pass


class NonAsciiLocalPartError(LocalPartError):
    def __init__(self, byte: int):
        self.byte = byte
        super().__init__(f"Local-part must be ASCII, found {describe_byte(byte)}")


class LocalPartTooLongError(LocalPartError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Local-part is {length} bytes, maximum is 64")


class InvalidQuotedStringError(LocalPartError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid quoted-string local-part: {reason}")


class InvalidDotAtomError(LocalPartError):
    def __init__(self, byte: Optional[int] = None):
        self.byte = byte
        if byte is None:
            message = "Dot-atom local-part cannot be empty"
        else:
            message = f"Dot-atom local-part contains invalid character {describe_byte(byte)}"
        super().__init__(message)


class ConsecutiveDotsError(LocalPartError):
    def __init__(self):
        super().__init__("Dot-atom local-part contains consecutive dots")


class LeadingOrTrailingDotError(LocalPartError):
    def __init__(self):
        super().__init__("Dot-atom local-part cannot start or end with a dot")


# --------------------------------------------------------------------------
# Email address


class EmailAddressError(RFC5322Error):
    """Raised when an email address cannot be parsed or built."""

    pass


class MissingAtSignError(EmailAddressError):
    def __init__(self):
        super().__init__("Missing '@' between local-part and domain")


class InvalidDisplayNameError(EmailAddressError):
    def __init__(self, display_name: str, reason: str):
        self.display_name = display_name
        self.reason = reason
        super().__init__(f"Invalid display name {display_name!r}: {reason}")


class InvalidLocalPartError(EmailAddressError):
    def __init__(self, error: LocalPartError):
        self.error = error
        super().__init__(f"Invalid local-part: {error}")


class InvalidDomainError(EmailAddressError):
    def __init__(self, error: Exception):
        self.error = error
        super().__init__(f"Invalid domain: {error}")


# --------------------------------------------------------------------------
# Header fields


class _ByteError(RFC5322Error):
    """Error pinned to one offending byte of an input."""

    def __init__(self, value: str, byte: int, reason: str):
        self.value = value
        self.byte = byte
        self.reason = reason
        super().__init__(f"{reason}: {describe_byte(byte)} in {value!r}")


class HeaderNameError(RFC5322Error):
    """Raised when a header field name violates RFC 5322 section 3.6.8."""

    pass


class EmptyHeaderNameError(HeaderNameError):
    def __init__(self):
        super().__init__("Field name cannot be empty")


class InvalidHeaderNameCharacterError(HeaderNameError, _ByteError):
    pass


class HeaderValueError(RFC5322Error):
    """Raised when a header field body violates RFC 5322 section 2.2."""

    pass


class InvalidFoldingError(HeaderValueError, _ByteError):
    pass


class InvalidHeaderValueCharacterError(HeaderValueError, _ByteError):
    pass


class HeaderError(RFC5322Error):
    """Raised when a "Name: value" header line cannot be parsed."""

    pass


class InvalidHeaderFormatError(HeaderError):
    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid header {line!r}: {reason}")


class InvalidHeaderNameError(HeaderError):
    def __init__(self, error: HeaderNameError):
        self.error = error
        super().__init__(f"Invalid header name: {error}")


class InvalidHeaderValueError(HeaderError):
    def __init__(self, error: HeaderValueError):
        self.error = error
        super().__init__(f"Invalid header value: {error}")


# --------------------------------------------------------------------------
# Message-ID


class MessageIdError(RFC5322Error):
    """Raised when a Message-ID violates RFC 5322 section 3.6.4."""

    pass


class MessageIdMissingAtSignError(MessageIdError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Message-ID {value!r} has no '@'")


class MessageIdMultipleAtSignsError(MessageIdError):
    def __init__(self, value: str, count: int):
        self.value = value
        self.count = count
        super().__init__(f"Message-ID {value!r} has {count} '@' signs, expected exactly one")


class InvalidMessageIdCharacterError(MessageIdError, _ByteError):
    pass


# --------------------------------------------------------------------------
# Message


class MessageError(RFC5322Error):
    """Raised when a message cannot be assembled."""

    pass


class MissingRequiredFieldError(MessageError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required field {field!r} is missing")


class InvalidMessageFieldError(MessageError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field} field: {reason}")


class MessageAddressError(MessageError):
    def __init__(self, field: str, error: EmailAddressError):
        self.field = field
        self.error = error
        super().__init__(f"Invalid address in {field}: {error}")


class MessageDateError(MessageError):
    def __init__(self, error: DateTimeError):
        self.error = error
        super().__init__(f"Invalid Date: {error}")


class MessageIdFieldError(MessageError):
    def __init__(self, error: MessageIdError):
        self.error = error
        super().__init__(f"Invalid Message-ID: {error}")


class MessageHeaderError(MessageError):
    def __init__(self, error: HeaderError):
        self.error = error
        super().__init__(f"Invalid additional header: {error}")
