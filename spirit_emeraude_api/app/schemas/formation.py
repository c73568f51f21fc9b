"""Pydantic schemas for training sessions ("formations")."""

from typing import Optional

from pydantic import Field

from .common import PayloadModel, RecordModel


class FormationCreate(PayloadModel):
    name: str = Field(..., min_length=1, examples=["Initiation à la Couture Pagne"])
    description: str = ""
    duration: str = Field("", description="Free text, e.g. '2 jours (12h)'")
    price: int = Field(..., ge=0, examples=[35000])
    materials: str = ""
    image: Optional[str] = None
    next_session: Optional[str] = Field(None, description="Date of the next session", examples=["2025-01-15"])


class FormationRead(RecordModel):
    name: str
    description: str
    duration: str
    price: int
    materials: str
    image: Optional[str] = None
    next_session: Optional[str] = None
