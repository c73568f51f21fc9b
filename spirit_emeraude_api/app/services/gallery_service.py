"""
Service layer for gallery photos.

Photos are filtered by category on the public gallery page; the
``"all"`` tab sends the sentinel handled by
``CategorizedContentService.list``.
"""

from ..schemas.gallery import GalleryPhotoRead
from .base import CategorizedContentService


class GalleryService(CategorizedContentService[GalleryPhotoRead]):
    kind = "Gallery photo"
