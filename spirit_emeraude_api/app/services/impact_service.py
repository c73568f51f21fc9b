"""Service layer for social-impact stories."""

from ..schemas.impact import ImpactRead
from .base import ContentService


class ImpactService(ContentService[ImpactRead]):
    kind = "Impact"
