"""Service layer for training sessions."""

from ..schemas.formation import FormationRead
from .base import ContentService


class FormationService(ContentService[FormationRead]):
    kind = "Formation"
