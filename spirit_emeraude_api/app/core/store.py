"""
In-memory record store.

The store keeps one ``Collection`` per content kind.  A collection is a
generic container over a record model (a pydantic model with an ``id``
field) plus a key factory; it assigns identifiers on insertion and
serves list, get, replace and delete.  Collections of categorized
content (products, gallery photos) also support filtering by
category.

Records live for the lifetime of the process only.  Each collection
guards its dict with its own lock since FastAPI may run handlers in a
thread pool.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..schemas.contact import ContactMessageRead
from ..schemas.formation import FormationRead
from ..schemas.gallery import GalleryPhotoRead
from ..schemas.impact import ImpactRead
from ..schemas.product import ProductRead
from .seed import SAMPLE_FORMATIONS, SAMPLE_GALLERY_PHOTOS, SAMPLE_IMPACTS, SAMPLE_PRODUCTS

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


def uuid_key() -> str:
    return str(uuid.uuid4())


class Collection(Generic[E]):
    """Insertion-ordered collection of records of one kind."""

    def __init__(self, model: Type[E], key_factory: Callable[[], str] = uuid_key) -> None:
        self.model = model
        self.key_factory = key_factory
        self._records: Dict[str, E] = {}
        self._lock = threading.Lock()

    def _build(self, record_id: str, data: BaseModel) -> E:
        return self.model(id=record_id, **data.model_dump())

    def create(self, data: BaseModel) -> E:
        """Store ``data`` under a freshly generated identifier and return the record."""
        with self._lock:
            record_id = self.key_factory()
            while record_id in self._records:
                record_id = self.key_factory()
            record = self._build(record_id, data)
            self._records[record_id] = record
        return record

    def list(self) -> List[E]:
        with self._lock:
            return list(self._records.values())

    def get(self, record_id: str) -> Optional[E]:
        """Return the record with ``record_id`` or ``None`` when absent."""
        with self._lock:
            return self._records.get(record_id)

    def replace(self, record_id: str, data: BaseModel) -> Optional[E]:
        """Replace a whole record, keeping its identifier and position.

        Returns the new record, or ``None`` if ``record_id`` is unknown.
        """
        with self._lock:
            if record_id not in self._records:
                return None
            record = self._build(record_id, data)
            self._records[record_id] = record
        return record

    def delete(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records


class CategorizedCollection(Collection[E]):
    """Collection whose records carry a ``category`` field."""

    def list_by_category(self, category: str) -> List[E]:
        """Return records whose category equals ``category``.

        Unknown categories simply match nothing.
        """
        with self._lock:
            return [r for r in self._records.values() if getattr(r, "category", None) == category]


class RecordStore:
    """The five content collections served by the API.

    Parameters
    ----------
    seed : bool
        When true, populate products, formations, impacts and gallery
        photos with the demo content from ``seed.py``.  Contact
        messages always start empty.
    key_factory : Callable[[], str]
        Identifier generator shared by all collections.
    """

    def __init__(self, seed: bool = True, key_factory: Callable[[], str] = uuid_key) -> None:
        self.products: CategorizedCollection[ProductRead] = CategorizedCollection(ProductRead, key_factory)
        self.formations: Collection[FormationRead] = Collection(FormationRead, key_factory)
        self.impacts: Collection[ImpactRead] = Collection(ImpactRead, key_factory)
        self.gallery: CategorizedCollection[GalleryPhotoRead] = CategorizedCollection(GalleryPhotoRead, key_factory)
        self.contact_messages: Collection[ContactMessageRead] = Collection(ContactMessageRead, key_factory)
        if seed:
            self.seed()

    def seed(self) -> None:
        """Insert the demo content through the regular ``create`` path."""
        for product in SAMPLE_PRODUCTS:
            self.products.create(product)
        for formation in SAMPLE_FORMATIONS:
            self.formations.create(formation)
        for impact in SAMPLE_IMPACTS:
            self.impacts.create(impact)
        for photo in SAMPLE_GALLERY_PHOTOS:
            self.gallery.create(photo)
        logger.info(
            "Seeded store: %d products, %d formations, %d impacts, %d gallery photos",
            len(self.products),
            len(self.formations),
            len(self.impacts),
            len(self.gallery),
        )
