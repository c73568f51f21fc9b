"""
Pydantic schemas for contact-form messages.

Messages are write-only from the public side: visitors submit them,
administrators list and delete them.  Length limits mirror the
storefront form so both sides reject the same input.

The reply address is validated with ``EmailStr`` and stored in its
normalized form: the domain part is lowercased (``Awa@Example.COM`` is
kept as ``Awa@example.com``) while the local part is left untouched.
"""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from .common import PayloadModel, RecordModel


class ContactMessageCreate(PayloadModel):
    """Schema for submitting a contact message."""

    name: str = Field(..., min_length=2, description="Sender name, at least 2 characters")
    phone: str = Field(..., min_length=8, description="Phone number, at least 8 characters")
    email: Optional[EmailStr] = Field(None, description="Optional reply address, domain lowercased")
    subject: Optional[str] = None
    message: str = Field(..., min_length=10, description="Message body, at least 10 characters")

    @field_validator("email", "subject", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # The form posts empty strings for untouched optional fields.
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ContactMessageRead(RecordModel):
    name: str
    phone: str
    email: Optional[str] = None
    subject: Optional[str] = None
    message: str
