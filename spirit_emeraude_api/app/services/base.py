"""
Generic CRUD service over one store collection.

Every content kind shares the same contract: list, get by id, create,
replace and delete.  Concrete services only name their kind (used in
log and error messages) and add whatever logic is specific to them.
Services never raise for a missing record: ``get`` and ``update``
return ``None`` and ``delete`` returns ``False`` so the API layer can
answer 404.
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from ..core.store import CategorizedCollection, Collection

E = TypeVar("E", bound=BaseModel)

# Category value the storefront sends for "no filter".
ALL_CATEGORIES = "all"


class ContentService(Generic[E]):
    """CRUD operations for one content kind."""

    kind = "Record"

    def __init__(self, collection: Collection[E]) -> None:
        self.collection = collection
        self.logger = logging.getLogger(type(self).__module__)

    def prepare(self, data: BaseModel) -> BaseModel:
        """Hook for subclasses to complete an input model before it is stored."""
        return data

    async def list(self) -> List[E]:
        return self.collection.list()

    async def get(self, record_id: str) -> Optional[E]:
        return self.collection.get(record_id)

    async def create(self, data: BaseModel) -> E:
        record = self.collection.create(self.prepare(data))
        self.logger.info("Created %s %s", self.kind.lower(), record.id)
        return record

    async def update(self, record_id: str, data: BaseModel) -> Optional[E]:
        record = self.collection.replace(record_id, self.prepare(data))
        if record is not None:
            self.logger.info("Updated %s %s", self.kind.lower(), record_id)
        return record

    async def delete(self, record_id: str) -> bool:
        deleted = self.collection.delete(record_id)
        if deleted:
            self.logger.info("Deleted %s %s", self.kind.lower(), record_id)
        return deleted


class CategorizedContentService(ContentService[E]):
    """Content whose listing can be narrowed to one category."""

    collection: CategorizedCollection[E]

    async def list(self, category: Optional[str] = None) -> List[E]:
        """List records, optionally restricted to ``category``.

        A missing or blank category, or the ``"all"`` sentinel, means no
        filter.  Any other value is matched exactly, so a category that
        does not exist yields an empty list rather than an error.
        """
        if category is None or not category.strip() or category == ALL_CATEGORIES:
            return self.collection.list()
        return self.collection.list_by_category(category)
