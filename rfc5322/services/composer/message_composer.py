"""Build Message values from loose caller input."""

import logging
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from rfc5322.config import ComposerConfig
from rfc5322.models.date_time import DateTime
from rfc5322.models.email_address import EmailAddress
from rfc5322.models.errors import (
    DateTimeError,
    EmailAddressError,
    HeaderError,
    InvalidMessageFieldError,
    MessageAddressError,
    MessageDateError,
    MessageHeaderError,
    MessageIdError,
    MessageIdFieldError,
    MissingRequiredFieldError,
)
from rfc5322.models.header import X_MAILER, Header
from rfc5322.models.message import Message, MessageId
from rfc5322.services.domain import DomainValidator

logger = logging.getLogger(__name__)

AddressInput = Union[str, EmailAddress, Mapping[str, Any]]
DateInput = Union[str, DateTime, datetime]
HeadersInput = Union[Mapping[str, str], Iterable[Union[Header, Tuple[str, str], Mapping[str, str]]]]


class MessageComposer:
    """
    Compose messages from strings, mappings or model values.

    Missing optional fields are filled from ComposerConfig: the Date is the
    current time in the configured offset, the Message-ID is generated under
    the configured domain (or the sender's domain) and X-Mailer is added when
    configured. Every error is reported as a MessageError subclass wrapping
    the grammar error.
    """

    def __init__(
        self,
        config: Optional[ComposerConfig] = None,
        domain_validator: Optional[DomainValidator] = None,
    ):
        """
        Initialize composer.

        Args:
            config: Composition defaults
            domain_validator: Validator for address domains; RFC 1123 by default
        """
        self.config = config or ComposerConfig()
        self.domain_validator = domain_validator

    def compose(
        self,
        from_: AddressInput,
        to: Iterable[AddressInput],
        subject: str,
        body: Union[str, bytes] = b"",
        cc: Optional[Iterable[AddressInput]] = None,
        bcc: Optional[Iterable[AddressInput]] = None,
        reply_to: Optional[AddressInput] = None,
        date: Optional[DateInput] = None,
        message_id: Optional[Union[str, MessageId]] = None,
        headers: Optional[HeadersInput] = None,
    ) -> Message:
        """
        Build a Message.

        Args:
            from_: Sender address
            to: Primary recipients, at least one
            subject: Subject line
            body: Body text (UTF-8 encoded) or raw bytes
            cc: Carbon-copy recipients
            bcc: Blind carbon-copy recipients, never serialized
            reply_to: Reply-To address
            date: Date value; now in the configured offset if omitted
            message_id: Message-ID; generated if omitted
            headers: Additional header fields, kept in order

        Returns:
            Assembled Message

        Raises:
            MissingRequiredFieldError: If From or To is missing
            MessageAddressError: If an address does not parse
            MessageDateError: If the date does not parse
            MessageIdFieldError: If the Message-ID is invalid
            MessageHeaderError: If an additional header is invalid
            InvalidMessageFieldError: If Subject contains a line break
        """
        if from_ is None:
            raise MissingRequiredFieldError("From")

        sender = self._address("From", from_)
        recipients = self._address_list("To", to)
        if not recipients:
            raise MissingRequiredFieldError("To")

        cc_list = self._address_list("Cc", cc) if cc is not None else None
        bcc_list = self._address_list("Bcc", bcc) if bcc is not None else None
        reply = self._address("Reply-To", reply_to) if reply_to is not None else None

        message = Message(
            from_=sender,
            to=recipients,
            subject=subject or "",
            date=self._date(date),
            message_id=self._message_id(message_id, sender),
            body=body.encode("utf-8") if isinstance(body, str) else bytes(body),
            cc=cc_list,
            bcc=bcc_list,
            reply_to=reply,
            additional_headers=self._headers(headers),
            mime_version=self.config.mime_version,
        )

        logger.debug(
            "Composed message %s with %d recipient(s)",
            message.message_id.value,
            len(message.recipients),
        )
        return message

    def compose_from_mapping(self, data: Mapping[str, Any]) -> Message:
        """
        Build a Message from a JMAP-style mapping.

        Recognized keys are from, to, cc, bcc, replyTo, subject, textBody,
        sentAt, messageId and headers. Address entries may be strings or
        {"name": ..., "email": ...} objects; from and replyTo may also be
        single-element lists.

        Args:
            data: Message description

        Returns:
            Assembled Message

        Raises:
            MessageError: Subclass describing the first invalid field
        """
        sender = _single(data.get("from"), "From")
        if sender is None:
            raise MissingRequiredFieldError("From")

        to = data.get("to")
        if not to:
            raise MissingRequiredFieldError("To")

        message_id = data.get("messageId")
        if isinstance(message_id, list):
            message_id = _single(message_id, "Message-ID")

        return self.compose(
            from_=sender,
            to=_as_list(to),
            subject=data.get("subject", ""),
            body=data.get("textBody", b""),
            cc=_as_list(data["cc"]) if data.get("cc") is not None else None,
            bcc=_as_list(data["bcc"]) if data.get("bcc") is not None else None,
            reply_to=_single(data.get("replyTo"), "Reply-To"),
            date=data.get("sentAt"),
            message_id=message_id,
            headers=data.get("headers"),
        )

    def _address(self, field: str, value: AddressInput) -> EmailAddress:
        if isinstance(value, EmailAddress):
            return value

        try:
            if isinstance(value, Mapping):
                email = value.get("email")
                if not email:
                    raise InvalidMessageFieldError(field, "address object without email")
                address = EmailAddress.parse(email, self.domain_validator)
                name = value.get("name")
                if name:
                    address = EmailAddress(name, address.local_part, address.domain)
                return address
            return EmailAddress.parse(value, self.domain_validator)
        except EmailAddressError as e:
            raise MessageAddressError(field, e) from e

    def _address_list(self, field: str, values: Optional[Iterable[AddressInput]]) -> Tuple[EmailAddress, ...]:
        if values is None:
            return ()
        return tuple(self._address(field, value) for value in _as_list(values))

    def _date(self, value: Optional[DateInput]) -> DateTime:
        if value is None:
            return DateTime.now(self.config.timezone_offset_seconds)
        if isinstance(value, DateTime):
            return value

        try:
            if isinstance(value, datetime):
                return DateTime.from_datetime(value)
            return DateTime.parse(value)
        except DateTimeError as e:
            raise MessageDateError(e) from e

    def _message_id(self, value: Optional[Union[str, MessageId]], sender: EmailAddress) -> MessageId:
        if isinstance(value, MessageId):
            return value
        if value is None:
            domain = self.config.message_id_domain or sender.domain.name
            return MessageId.generate(domain)

        try:
            return MessageId.parse(value)
        except MessageIdError as e:
            raise MessageIdFieldError(e) from e

    def _headers(self, headers: Optional[HeadersInput]) -> Tuple[Header, ...]:
        result: List[Header] = []

        if headers is not None:
            items = headers.items() if isinstance(headers, Mapping) else headers
            for item in items:
                result.append(_header(item))

        if self.config.x_mailer and not any(header.name == X_MAILER for header in result):
            result.append(_header((X_MAILER, self.config.x_mailer)))

        return tuple(result)


def _header(item: Union[Header, Tuple[str, str], Mapping[str, str]]) -> Header:
    if isinstance(item, Header):
        return item

    try:
        if isinstance(item, Mapping):
            return Header.of(item["name"], item["value"])
        name, value = item
        return Header.of(name, value)
    except HeaderError as e:
        raise MessageHeaderError(e) from e


def _as_list(value: Any) -> List[Any]:
    """A single address (string or object) becomes a one-element list."""
    if isinstance(value, (str, EmailAddress, Mapping)):
        return [value]
    return list(value)


def _single(value: Any, field: str) -> Any:
    if isinstance(value, list):
        if not value:
            return None
        if len(value) > 1:
            raise InvalidMessageFieldError(field, f"expected one address, got {len(value)}")
        return value[0]
    return value

