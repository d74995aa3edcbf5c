"""
Health check endpoint for API v1.

Reports that the service is up and how many cards it currently holds.
Useful for container orchestrators and smoke tests.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from card_store_api.app.core.dependencies import get_card_store
from card_store_api.app.services.card_service import CardStore

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(store: CardStore = Depends(get_card_store)) -> Dict[str, Any]:
    return {"status": "ok", "cards": len(store)}
