"""RFC 5322 Internet Message Format: dates, addresses, headers and messages."""

from .models import (
    DateComponents,
    DateTime,
    EmailAddress,
    Header,
    HeaderList,
    HeaderName,
    HeaderValue,
    LocalPart,
    Message,
    MessageId,
    RFC5322Error,
)
from .services.composer import MessageComposer

__version__ = "1.0.0"

__all__ = [
    "DateComponents",
    "DateTime",
    "EmailAddress",
    "Header",
    "HeaderList",
    "HeaderName",
    "HeaderValue",
    "LocalPart",
    "Message",
    "MessageComposer",
    "MessageId",
    "RFC5322Error",
]
