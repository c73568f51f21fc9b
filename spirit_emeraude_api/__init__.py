"""
Top-level package for the Spirit Emeraude content API.

The HTTP application lives in ``spirit_emeraude_api.app``; a typed
client for the same API lives in ``spirit_emeraude_api.client``.
"""

__all__ = []
