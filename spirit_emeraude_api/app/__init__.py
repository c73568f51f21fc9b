"""
Application package initializer.

The content API serves the storefront's catalog, training sessions,
impact stories, gallery and contact form from an in-memory store.
Each content kind has its own schema module, service and router under
``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
