"""Message composition service."""

from .message_composer import MessageComposer

__all__ = ["MessageComposer"]
