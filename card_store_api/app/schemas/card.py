"""
Pydantic models for card data.

``CardCreate`` describes the body accepted by ``POST /cards``: two
required, non-empty strings.  ``CardRead`` is what the API returns
and what the store keeps.  ``CardDeleted`` wraps a removed card
together with a confirmation message.
"""

from pydantic import BaseModel, Field, StrictStr


class CardBase(BaseModel):
    suit: StrictStr = Field(..., min_length=1, examples=["Clubs"])
    value: StrictStr = Field(..., min_length=1, examples=["2"])


class CardCreate(CardBase):
    """Schema for creating a card.  Unknown fields are ignored."""
    pass


class CardRead(BaseModel):
    """Schema for reading a card from the API."""

    id: int
    suit: str
    value: str

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }


class CardDeleted(BaseModel):
    """Response body returned after a card has been removed."""

    message: str
    card: CardRead


class Message(BaseModel):
    """Plain message body used for error responses."""

    message: str


# Fixed response messages shared by the handlers and the error handlers.
CARD_NOT_FOUND = "Card not found"
CARD_FIELDS_REQUIRED = "Suit and value are required properties."
MALFORMED_BODY = "Malformed JSON body."
