"""
Training session endpoints for API v1.

Sessions have no category; a ``category`` query parameter sent by
generic clients is ignored.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from spirit_emeraude_api.app.api.deps import get_formation_service
from spirit_emeraude_api.app.core.security import require_admin
from spirit_emeraude_api.app.schemas.common import ApiResponse, envelope
from spirit_emeraude_api.app.schemas.formation import FormationCreate, FormationRead
from spirit_emeraude_api.app.services.formation_service import FormationService

router = APIRouter()

NOT_FOUND = "Formation not found"


@router.get("", response_model=ApiResponse[List[FormationRead]])
async def list_formations(service: FormationService = Depends(get_formation_service)):
    return envelope(await service.list())


@router.get("/{formation_id}", response_model=ApiResponse[FormationRead])
async def get_formation(formation_id: str, service: FormationService = Depends(get_formation_service)):
    formation = await service.get(formation_id)
    if formation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(formation)


@router.post("", response_model=ApiResponse[FormationRead], status_code=status.HTTP_201_CREATED)
async def create_formation(
    formation_in: FormationCreate,
    service: FormationService = Depends(get_formation_service),
    current_user: dict = Depends(require_admin),
):
    """Create a training session (admin only)."""
    return envelope(await service.create(formation_in), message="Formation créée")


@router.put("/{formation_id}", response_model=ApiResponse[FormationRead])
async def update_formation(
    formation_id: str,
    formation_in: FormationCreate,
    service: FormationService = Depends(get_formation_service),
    current_user: dict = Depends(require_admin),
):
    """Replace a training session (admin only)."""
    formation = await service.update(formation_id, formation_in)
    if formation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(formation, message="Formation modifiée")


@router.delete("/{formation_id}", response_model=ApiResponse)
async def delete_formation(
    formation_id: str,
    service: FormationService = Depends(get_formation_service),
    current_user: dict = Depends(require_admin),
):
    """Delete a training session (admin only)."""
    if not await service.delete(formation_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(None, message="Formation supprimée")
