"""
Message Schemas.

Request/response schemas for the simulated share-by-message endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SendMessageRequest(BaseModel):
    """Schema for sending a note to a phone number."""

    recipient: str | None = Field(
        default=None,
        description="Recipient phone number in international format",
        examples=["+15551234567"],
    )
    content: str | None = Field(default=None, description="Message body")
    message_type: str | None = Field(
        default=None,
        description=(
            "\"voice\" for a voice call, anything else is sent as text; "
            "messaging.yaml default_message_type when omitted"
        ),
    )
    voice_type: str | None = Field(
        default=None,
        description="Voice used for voice calls",
        examples=["woman"],
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SendMessageResponse(BaseModel):
    """Result of a simulated send."""

    success: bool
    message: str

    model_config = ConfigDict(from_attributes=True)
