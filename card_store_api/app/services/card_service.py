"""
Business logic for playing cards.

The ``CardStore`` keeps the card collection in memory together with
the counter used to hand out new identifiers.  Nothing is persisted:
every new store starts from the seed records below.  The store is the
only place where the collection is mutated; API handlers receive the
instance through a FastAPI dependency.

All public methods take the store lock, so identifier allocation and
list mutation are atomic with respect to each other even when the
handlers run on several threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from card_store_api.app.schemas.card import CardRead


logger = logging.getLogger(__name__)


SEED_CARDS = (
    {"id": 1, "suit": "Hearts", "value": "Ace"},
    {"id": 2, "suit": "Spades", "value": "King"},
    {"id": 3, "suit": "Diamonds", "value": "Queen"},
)


class CardValidationError(ValueError):
    """Raised when a card is created without a suit or value."""


class CardStore:
    """In-memory collection of cards with a monotonically increasing ID counter."""

    def __init__(self, seed: Optional[Iterable[dict]] = None) -> None:
        self._seed = [dict(item) for item in (SEED_CARDS if seed is None else seed)]
        self._lock = threading.Lock()
        self._cards: List[CardRead] = []
        self._next_id = 1
        self.reset()

    def reset(self) -> None:
        """Restore the seed records and the matching ID counter."""
        with self._lock:
            self._cards = [CardRead(**item) for item in self._seed]
            self._next_id = max((card.id for card in self._cards), default=0) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._cards)

    @property
    def next_id(self) -> int:
        """Identifier the next created card will receive."""
        with self._lock:
            return self._next_id

    def list(self) -> List[CardRead]:
        """Return all cards in their current order."""
        with self._lock:
            return list(self._cards)

    def get(self, card_id: int) -> Optional[CardRead]:
        """Return the card with ``card_id`` or ``None`` if there is none."""
        with self._lock:
            return self._find(card_id)

    def create(self, suit: Optional[str], value: Optional[str]) -> CardRead:
        """Append a new card and return it.

        Raises
        ------
        CardValidationError
            If ``suit`` or ``value`` is missing or empty.  The collection
            and the counter are left untouched in that case.
        """
        if not suit or not value:
            raise CardValidationError("Suit and value are required properties.")
        with self._lock:
            card = CardRead(id=self._next_id, suit=suit, value=value)
            self._next_id += 1
            self._cards.append(card)
        logger.info("Created card %s (%s of %s)", card.id, card.value, card.suit)
        return card

    def delete(self, card_id: int) -> Optional[CardRead]:
        """Remove the card with ``card_id`` and return it.

        Returns ``None`` when no such card exists.
        """
        with self._lock:
            for index, card in enumerate(self._cards):
                if card.id == card_id:
                    removed = self._cards.pop(index)
                    break
            else:
                return None
        logger.info("Deleted card %s", removed.id)
        return removed

    def _find(self, card_id: int) -> Optional[CardRead]:
        # Caller must hold the lock.
        for card in self._cards:
            if card.id == card_id:
                return card
        return None
