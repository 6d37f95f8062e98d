"""Configuration models for message composition."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from rfc5322.models.date_time import validate_timezone_offset
from rfc5322.models.errors import DateTimeError, HeaderValueError
from rfc5322.models.header import HeaderValue
from rfc5322.services.domain import DomainError, validate_domain


def _reject_line_breaks(v: str) -> str:
    if "\r" in v or "\n" in v:
        raise ValueError("Line breaks are not allowed")
    return v


class ComposerConfig(BaseModel):
    """Defaults applied by MessageComposer when a field is not given."""

    mime_version: str = "1.0"
    timezone_offset_seconds: int = 0
    message_id_domain: Optional[str] = None
    x_mailer: Optional[str] = None

    @field_validator("mime_version")
    def validate_mime_version(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("mime_version is required")
        return _reject_line_breaks(v)

    @field_validator("timezone_offset_seconds")
    def check_timezone_offset(cls, v: int) -> int:
        try:
            return validate_timezone_offset(v)
        except DateTimeError as e:
            raise ValueError(str(e)) from e

    @field_validator("message_id_domain")
    def validate_message_id_domain(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            validate_domain(v.encode("utf-8"))
        except DomainError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("x_mailer")
    def validate_x_mailer(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        _reject_line_breaks(v)
        try:
            HeaderValue(v)
        except HeaderValueError as e:
            raise ValueError(str(e)) from e
        return v


class AppConfig(BaseModel):
    """Main library configuration."""

    schema_version: str = "1.0"
    composer: ComposerConfig = Field(default_factory=ComposerConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
