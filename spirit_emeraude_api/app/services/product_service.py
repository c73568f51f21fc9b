"""
Service layer for catalog products.

Besides the generic CRUD operations, the product service derives a
URL slug from the product name when the admin console does not send
one, so every stored product can be addressed by slug on the
storefront.
"""

from __future__ import annotations

import re
import unicodedata
import uuid

from ..schemas.product import ProductCreate, ProductRead
from .base import CategorizedContentService

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
FALLBACK_SLUG = "produit"


def slugify(value: str) -> str:
    """Return a lowercase ASCII slug for ``value``.

    Accents are stripped (``"Élégance"`` becomes ``"elegance"``) and runs
    of any other character collapse into a single hyphen.
    """
    normalized = unicodedata.normalize("NFKD", value)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_ALNUM.sub("-", ascii_text).strip("-")


class ProductService(CategorizedContentService[ProductRead]):
    kind = "Product"

    def prepare(self, data: ProductCreate) -> ProductCreate:
        if data.slug and data.slug.strip():
            return data
        # Names without any Latin letter or digit slugify to nothing.
        slug = slugify(data.name) or f"{FALLBACK_SLUG}-{uuid.uuid4().hex[:8]}"
        return data.model_copy(update={"slug": slug})
