"""
Version 1 of the content API.

Breaking changes should be introduced in a new version subpackage
(e.g. ``v2``) so the storefront keeps working during migrations.
"""
