"""
Top-level package for the Card Store API.

All functionality lives in submodules under ``app``; import the
application as ``card_store_api.app.main:app``.
"""

__all__ = []
