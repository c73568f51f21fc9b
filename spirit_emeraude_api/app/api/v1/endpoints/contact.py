"""
Contact endpoints for API v1.

Visitors submit messages through ``POST /contact``; the payload is
validated against the contact form rules and rejected with a 400 and
per-field details when it does not comply.  Administrators list,
read and delete received messages.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from spirit_emeraude_api.app.api.deps import get_contact_service
from spirit_emeraude_api.app.core.security import require_admin
from spirit_emeraude_api.app.schemas.common import ApiResponse, envelope
from spirit_emeraude_api.app.schemas.contact import ContactMessageCreate, ContactMessageRead
from spirit_emeraude_api.app.services.contact_service import ContactService

router = APIRouter()

NOT_FOUND = "Contact message not found"


@router.post("", response_model=ApiResponse[ContactMessageRead], status_code=status.HTTP_201_CREATED)
async def send_contact_message(
    message_in: ContactMessageCreate,
    service: ContactService = Depends(get_contact_service),
):
    """Submit a contact message.  Publicly accessible."""
    message = await service.submit(message_in)
    return envelope(message, message="Message envoyé avec succès")


@router.get("", response_model=ApiResponse[List[ContactMessageRead]])
async def list_contact_messages(
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
):
    """List received messages (admin only)."""
    return envelope(await service.list())


@router.get("/{message_id}", response_model=ApiResponse[ContactMessageRead])
async def get_contact_message(
    message_id: str,
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
):
    message = await service.get(message_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(message)


@router.delete("/{message_id}", response_model=ApiResponse)
async def delete_contact_message(
    message_id: str,
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
):
    """Delete a received message (admin only)."""
    if not await service.delete(message_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(None, message="Message supprimé")
