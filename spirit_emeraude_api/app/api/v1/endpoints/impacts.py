"""Impact story endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from spirit_emeraude_api.app.api.deps import get_impact_service
from spirit_emeraude_api.app.core.security import require_admin
from spirit_emeraude_api.app.schemas.common import ApiResponse, envelope
from spirit_emeraude_api.app.schemas.impact import ImpactCreate, ImpactRead
from spirit_emeraude_api.app.services.impact_service import ImpactService

router = APIRouter()

NOT_FOUND = "Impact not found"


@router.get("", response_model=ApiResponse[List[ImpactRead]])
async def list_impacts(service: ImpactService = Depends(get_impact_service)):
    return envelope(await service.list())


@router.get("/{impact_id}", response_model=ApiResponse[ImpactRead])
async def get_impact(impact_id: str, service: ImpactService = Depends(get_impact_service)):
    impact = await service.get(impact_id)
    if impact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(impact)


@router.post("", response_model=ApiResponse[ImpactRead], status_code=status.HTTP_201_CREATED)
async def create_impact(
    impact_in: ImpactCreate,
    service: ImpactService = Depends(get_impact_service),
    current_user: dict = Depends(require_admin),
):
    return envelope(await service.create(impact_in), message="Impact créé")


@router.put("/{impact_id}", response_model=ApiResponse[ImpactRead])
async def update_impact(
    impact_id: str,
    impact_in: ImpactCreate,
    service: ImpactService = Depends(get_impact_service),
    current_user: dict = Depends(require_admin),
):
    impact = await service.update(impact_id, impact_in)
    if impact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(impact, message="Impact modifié")


@router.delete("/{impact_id}", response_model=ApiResponse)
async def delete_impact(
    impact_id: str,
    service: ImpactService = Depends(get_impact_service),
    current_user: dict = Depends(require_admin),
):
    if not await service.delete(impact_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(None, message="Impact supprimé")
