"""
Service layer abstraction.

Each service wraps one collection of the in-memory ``RecordStore`` and
holds the small amount of business logic the API needs (slug
derivation, category filter sentinels, logging of writes).  Endpoints
depend on services only, never on the store directly.
"""
