"""
Gallery endpoints for API v1.

The public gallery page filters photos by category tab; the ``all``
tab sends ``category=all`` which lists everything.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from spirit_emeraude_api.app.api.deps import get_gallery_service
from spirit_emeraude_api.app.core.security import require_admin
from spirit_emeraude_api.app.schemas.common import ApiResponse, envelope
from spirit_emeraude_api.app.schemas.gallery import GalleryPhotoCreate, GalleryPhotoRead
from spirit_emeraude_api.app.services.gallery_service import GalleryService

router = APIRouter()

NOT_FOUND = "Gallery photo not found"


@router.get("", response_model=ApiResponse[List[GalleryPhotoRead]])
async def list_gallery_photos(
    category: Optional[str] = Query(None, description="Gallery category, or 'all'"),
    service: GalleryService = Depends(get_gallery_service),
):
    return envelope(await service.list(category))


@router.get("/{photo_id}", response_model=ApiResponse[GalleryPhotoRead])
async def get_gallery_photo(photo_id: str, service: GalleryService = Depends(get_gallery_service)):
    photo = await service.get(photo_id)
    if photo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(photo)


@router.post("", response_model=ApiResponse[GalleryPhotoRead], status_code=status.HTTP_201_CREATED)
async def create_gallery_photo(
    photo_in: GalleryPhotoCreate,
    service: GalleryService = Depends(get_gallery_service),
    current_user: dict = Depends(require_admin),
):
    """Add a photo to the gallery (admin only).

    ``imageUrl`` must already point at uploaded media; uploads are
    handled by the media storage service, not by this API.
    """
    return envelope(await service.create(photo_in), message="Photo ajoutée")


@router.put("/{photo_id}", response_model=ApiResponse[GalleryPhotoRead])
async def update_gallery_photo(
    photo_id: str,
    photo_in: GalleryPhotoCreate,
    service: GalleryService = Depends(get_gallery_service),
    current_user: dict = Depends(require_admin),
):
    photo = await service.update(photo_id, photo_in)
    if photo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(photo, message="Photo modifiée")


@router.delete("/{photo_id}", response_model=ApiResponse)
async def delete_gallery_photo(
    photo_id: str,
    service: GalleryService = Depends(get_gallery_service),
    current_user: dict = Depends(require_admin),
):
    if not await service.delete(photo_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(None, message="Photo supprimée")
