"""
FastAPI dependencies resolving the store and services.

The store is built by ``create_app`` and kept on ``app.state`` so every
application instance (and every test) owns an isolated store.
"""

from fastapi import Depends, Request

from ..core.store import RecordStore
from ..services.contact_service import ContactService
from ..services.formation_service import FormationService
from ..services.gallery_service import GalleryService
from ..services.impact_service import ImpactService
from ..services.product_service import ProductService


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_product_service(store: RecordStore = Depends(get_store)) -> ProductService:
    return ProductService(store.products)


def get_formation_service(store: RecordStore = Depends(get_store)) -> FormationService:
    return FormationService(store.formations)


def get_impact_service(store: RecordStore = Depends(get_store)) -> ImpactService:
    return ImpactService(store.impacts)


def get_gallery_service(store: RecordStore = Depends(get_store)) -> GalleryService:
    return GalleryService(store.gallery)


def get_contact_service(store: RecordStore = Depends(get_store)) -> ContactService:
    return ContactService(store.contact_messages)
