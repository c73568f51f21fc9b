"""
Pydantic schemas for catalog products.

``ProductCreate`` is the admin payload; ``ProductRead`` is the stored
record returned by the API.  ``slug`` is optional on input because the
admin console does not send one; the service derives it from the name.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .common import PayloadModel, RecordModel


class ProductCategory(str, Enum):
    """Closed set of product categories (bag, pouch, sandal, accessory, custom, seasonal)."""

    SAC = "sac"
    TROUSSE = "trousse"
    SANDALE = "sandale"
    ACCESSOIRE = "accessoire"
    PERSONNALISE = "personnalise"
    SAISONNIER = "saisonnier"


class ProductCreate(PayloadModel):
    name: str = Field(..., min_length=1, examples=["Sac Élégance Pagne"])
    category: ProductCategory = Field(..., examples=["sac"])
    price: int = Field(..., ge=0, description="Price in minor currency units", examples=[45000])
    description: str = Field("", examples=["Sac à main en pagne wax traditionnel"])
    images: List[str] = Field(default_factory=list, description="Ordered list of image URLs")
    is_featured: bool = False
    in_stock: bool = True
    slug: Optional[str] = Field(None, description="URL slug; derived from the name when omitted")


class ProductRead(RecordModel):
    name: str
    category: ProductCategory
    price: int
    description: str
    images: List[str]
    is_featured: bool
    in_stock: bool
    slug: str = Field(..., min_length=1)
