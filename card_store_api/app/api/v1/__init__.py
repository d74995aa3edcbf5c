"""
Version 1 of the API.

Bundles the card and health endpoints.  Breaking changes belong in a
new version subpackage.
"""
