"""
Pydantic schema definitions for API payloads.

Each content kind (products, formations, impacts, gallery photos,
contact messages) defines a ``<Kind>Create`` input model and a
``<Kind>Read`` record model.  Stored records are instances of the
``Read`` models.
"""
