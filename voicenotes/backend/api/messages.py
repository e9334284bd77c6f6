"""
Messaging API Endpoints.

Share a note by (simulated) text message or voice call.
"""

from fastapi import APIRouter

from voicenotes.backend.core.config import get_app_config
from voicenotes.backend.core.dependencies import MessagingServiceDep
from voicenotes.backend.schemas.base import ErrorResponse
from voicenotes.backend.schemas.message import SendMessageRequest, SendMessageResponse

router = APIRouter()


@router.post(
    "/send-message",
    response_model=SendMessageResponse,
    summary="Send a note as a message",
    description="Simulates delivery through a messaging provider. Nothing is sent.",
    responses={400: {"model": ErrorResponse, "description": "Invalid recipient or content"}},
)
async def send_message(
    data: SendMessageRequest,
    service: MessagingServiceDep,
) -> SendMessageResponse:
    result = await service.send_message(
        recipient=data.recipient,
        content=data.content,
        message_type=data.message_type or get_app_config().messaging.default_message_type,
        voice_type=data.voice_type,
    )
    return SendMessageResponse.model_validate(result)
