"""
Service layer for contact-form messages.

Messages are append-only from the visitor's side: the public API can
only submit them.  Administrators list and delete them.  Messages are
never updated.
"""

from __future__ import annotations

from ..schemas.contact import ContactMessageCreate, ContactMessageRead
from .base import ContentService


class ContactService(ContentService[ContactMessageRead]):
    kind = "Contact message"

    async def submit(self, data: ContactMessageCreate) -> ContactMessageRead:
        """Store a validated message submitted through the contact form."""
        record = self.collection.create(data)
        # Only the id and sender name are logged; the body may hold personal data.
        self.logger.info("Received contact message %s from %s", record.id, record.name)
        return record
