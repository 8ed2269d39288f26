"""Message vocabulary endpoint."""

from fastapi import APIRouter

from api.models import MessagesResponse
from core import all_message_keys


router = APIRouter(tags=["Messages"])


@router.get("/messages", response_model=MessagesResponse)
async def list_messages():
    """List every warning and suggestion key feedback can contain."""
    return MessagesResponse(**all_message_keys())
