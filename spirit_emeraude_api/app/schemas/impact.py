"""
Pydantic schemas for social-impact stories.

Storefront pages always render the first image of a story, so at
least one image is required on creation.
"""

from typing import List, Optional

from pydantic import Field

from .common import PayloadModel, RecordModel


class ImpactCreate(PayloadModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    images: List[str] = Field(..., min_length=1, description="Image URLs; the first one is the cover")
    date: str = Field(..., examples=["2024-11-15"])
    location: Optional[str] = None


class ImpactRead(RecordModel):
    name: str
    description: str
    images: List[str]
    date: str
    location: Optional[str] = None
