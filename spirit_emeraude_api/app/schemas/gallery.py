"""Pydantic schemas for gallery photos."""

from enum import Enum
from typing import Optional

from pydantic import Field

from .common import PayloadModel, RecordModel


class GalleryCategory(str, Enum):
    """Closed set of gallery categories (workshop, creation, humanitarian, other)."""

    ATELIER = "atelier"
    CREATION = "creation"
    HUMANITAIRE = "humanitaire"
    AUTRE = "autre"


class GalleryPhotoCreate(PayloadModel):
    name: Optional[str] = None
    category: GalleryCategory = Field(..., examples=["creation"])
    image_url: str = Field(..., min_length=1)


class GalleryPhotoRead(RecordModel):
    name: Optional[str] = None
    category: GalleryCategory
    image_url: str
