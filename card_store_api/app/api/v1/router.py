"""
Top-level router for version 1 of the API.

Aggregates the endpoint routers under their resource prefixes.  The
application mounts this router twice, at the root and under
``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import cards, health

router = APIRouter()

router.include_router(cards.router, prefix="/cards", tags=["cards"])
router.include_router(health.router, prefix="/health", tags=["health"])
