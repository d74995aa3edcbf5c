"""
Card endpoints for API v1.

These routes expose list, retrieve, create and delete operations on
the in-memory card collection.  There is no update route.  Card IDs
in the path are parsed as integers; a segment that is not a number
can never match a card and is answered with the usual 404.
"""

import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from card_store_api.app.core.dependencies import get_card_store
from card_store_api.app.schemas.card import (
    CARD_NOT_FOUND,
    CardCreate,
    CardDeleted,
    CardRead,
    Message,
)
from card_store_api.app.services.card_service import CardStore, CardValidationError


logger = logging.getLogger(__name__)

router = APIRouter()

_CARD_ID_RE = re.compile(r"-?[0-9]+")


def _parse_card_id(raw_id: str) -> Optional[int]:
    if not _CARD_ID_RE.fullmatch(raw_id):
        return None
    try:
        return int(raw_id)
    except ValueError:
        # Longer than the interpreter allows for int conversion.
        return None


def _not_found(raw_id: str) -> HTTPException:
    logger.info("Card %s not found", raw_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CARD_NOT_FOUND)


@router.get("", response_model=List[CardRead])
async def list_cards(store: CardStore = Depends(get_card_store)) -> List[CardRead]:
    """Return every card in the collection, in insertion order."""
    return store.list()


@router.get("/{card_id}", response_model=CardRead, responses={404: {"model": Message}})
async def get_card(card_id: str, store: CardStore = Depends(get_card_store)) -> CardRead:
    """Retrieve a single card by its ID.

    Returns HTTP 404 with ``{"message": "Card not found"}`` if no card
    has this ID.
    """
    parsed_id = _parse_card_id(card_id)
    card = store.get(parsed_id) if parsed_id is not None else None
    if card is None:
        raise _not_found(card_id)
    return card


@router.post(
    "",
    response_model=CardRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": Message}},
)
async def create_card(card_in: CardCreate, store: CardStore = Depends(get_card_store)) -> CardRead:
    """Add a new card.

    The server assigns the ``id``; ``suit`` and ``value`` are required
    and must be non-empty strings, otherwise HTTP 400 is returned.
    """
    try:
        return store.create(card_in.suit, card_in.value)
    except CardValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.delete("/{card_id}", response_model=CardDeleted, responses={404: {"model": Message}})
async def delete_card(card_id: str, store: CardStore = Depends(get_card_store)) -> CardDeleted:
    """Remove a card and return it together with a confirmation message."""
    parsed_id = _parse_card_id(card_id)
    removed = store.delete(parsed_id) if parsed_id is not None else None
    if removed is None:
        raise _not_found(card_id)
    return CardDeleted(message=f"Card with ID {parsed_id} removed.", card=removed)
