"""
Messaging Service.

Simulated "send note as a message" integration. Validates the recipient
and content, waits to imitate a provider round trip, and reports success.
Nothing is delivered and nothing is retried.

Usage:
    service = MessagingService(delay_seconds=1.0)
    result = await service.send_message("+15551234567", "hello", "text")
    result.message  # "Message sent successfully via text message"
"""

import asyncio
import re
from dataclasses import dataclass, field
from datetime import datetime

from voicenotes.backend.core.exceptions import ValidationError
from voicenotes.backend.core.utils import utc_now
from voicenotes.backend.services.base import BaseService

# E.164-like: optional "+", then 2-15 digits, first digit 1-9
PHONE_PATTERN = re.compile(r"\+?[1-9]\d{1,14}", re.ASCII)

CHANNEL_LABELS = {
    "text": "text message",
    "voice": "voice call",
}


@dataclass
class MessageResult:
    """Result of a send attempt."""

    success: bool
    message: str
    recipient: str
    message_type: str
    timestamp: datetime = field(default_factory=utc_now)


def normalize_recipient(recipient: str) -> str:
    """Strip all whitespace, so "+1 555 123 4567" becomes "+15551234567"."""
    return re.sub(r"\s+", "", recipient)


def is_valid_recipient(recipient: str) -> bool:
    return PHONE_PATTERN.fullmatch(normalize_recipient(recipient)) is not None


class MessagingService(BaseService):
    """Mock messaging provider."""

    def __init__(self, delay_seconds: float = 1.0) -> None:
        super().__init__()
        self.delay_seconds = delay_seconds

    async def send_message(
        self,
        recipient: str | None,
        content: str | None,
        message_type: str = "text",
        voice_type: str | None = None,
    ) -> MessageResult:
        """
        Pretend to send content to a phone number.

        Raises:
            ValidationError: If recipient or content is missing, or the
                recipient is not a phone number in international format
        """
        if not recipient or not recipient.strip() or not content or not content.strip():
            raise ValidationError(
                "Recipient phone number and content are required",
                details={"missing_fields": [
                    name for name, value in (("recipient", recipient), ("content", content))
                    if not value or not value.strip()
                ]},
            )

        if not is_valid_recipient(recipient):
            raise ValidationError(
                "Invalid phone number format. Please use international format "
                "(e.g., +1234567890)",
                details={"recipient": recipient},
            )

        normalized = normalize_recipient(recipient)
        self._log_operation(
            "Sending message",
            message_type=message_type,
            voice_type=voice_type if message_type == "voice" else None,
            content_length=len(content),
        )

        await asyncio.sleep(self.delay_seconds)

        channel = CHANNEL_LABELS["voice" if message_type == "voice" else "text"]
        self._log_debug("Message simulated", channel=channel)

        return MessageResult(
            success=True,
            message=f"Message sent successfully via {channel}",
            recipient=normalized,
            message_type=message_type,
        )
