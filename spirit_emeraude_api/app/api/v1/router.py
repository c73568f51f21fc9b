"""
Top-level router for version 1 of the API.

This router aggregates the content routers under their resource
names.  The storefront and the upstream content API address resources
in the singular (``/product``, ``/formation``...), while the legacy
storefront server used plural paths (``/products``, ``/formations``...).
Both resolve to the same handlers; the plural aliases are hidden from
the OpenAPI schema.
"""

from fastapi import APIRouter

from .endpoints import contact, formations, gallery, impacts, products

router = APIRouter()

router.include_router(products.router, prefix="/product", tags=["products"])
router.include_router(formations.router, prefix="/formation", tags=["formations"])
router.include_router(impacts.router, prefix="/impact", tags=["impacts"])
router.include_router(gallery.router, prefix="/gallery", tags=["gallery"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])

router.include_router(products.router, prefix="/products", include_in_schema=False)
router.include_router(formations.router, prefix="/formations", include_in_schema=False)
router.include_router(impacts.router, prefix="/impacts", include_in_schema=False)
router.include_router(contact.router, prefix="/contacts", include_in_schema=False)
