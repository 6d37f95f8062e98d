"""Value types for the RFC 5322 grammars"""

from .date_time import DateComponents, DateTime
from .email_address import EmailAddress
from .errors import (
    DateComponentsError,
    DateTimeError,
    EmailAddressError,
    HeaderError,
    HeaderNameError,
    HeaderValueError,
    LocalPartError,
    MessageError,
    MessageIdError,
    RFC5322Error,
)
from .header import Header, HeaderList, HeaderName, HeaderValue
from .local_part import LocalPart, LocalPartKind
from .message import Message, MessageId

__all__ = [
    "DateComponents",
    "DateTime",
    "EmailAddress",
    "Header",
    "HeaderList",
    "HeaderName",
    "HeaderValue",
    "LocalPart",
    "LocalPartKind",
    "Message",
    "MessageId",
    "RFC5322Error",
    "DateComponentsError",
    "DateTimeError",
    "LocalPartError",
    "EmailAddressError",
    "HeaderNameError",
    "HeaderValueError",
    "HeaderError",
    "MessageIdError",
    "MessageError",
]
