"""JSON-backed collection of saved cards."""
from __future__ import annotations

import json
import logging
import os
import shutil
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional

from .models import Card, card_from_dict, card_to_dict

logger = logging.getLogger(__name__)

STORE_VERSION = 1


class CardStore:
    """Owns a list of cards (newest first) with an explicit load/persist boundary.

    Mutating methods persist immediately, like the app they come from.
    """

    def __init__(self, path: str):
        self.path = str(path)
        self.cards: List[Card] = []

    def load(self) -> "CardStore":
        if not os.path.exists(self.path):
            logger.debug("Card store %s does not exist yet; starting empty", self.path)
            self.cards = []
            return self
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                payload = json.load(fh)
            self.cards = [card_from_dict(item) for item in payload.get("cards", [])]
        except (OSError, ValueError, KeyError, AttributeError, TypeError) as exc:
            logger.exception("Failed to load card store %s: %s", self.path, exc)
            raise
        logger.info("Loaded %d card(s) from %s", len(self.cards), self.path)
        return self

    def persist(self) -> None:
        payload = {"version": STORE_VERSION, "cards": [card_to_dict(c) for c in self.cards]}
        tmp_path = f"{self.path}.tmp"
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        try:
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2)
            shutil.move(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as exc:
            logger.exception("Failed to write card store %s: %s", self.path, exc)
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        logger.debug("Persisted %d card(s) to %s", len(self.cards), self.path)

    def get(self, card_id: str) -> Optional[Card]:
        return next((c for c in self.cards if c.id == card_id), None)

    def save(self, card: Card) -> Card:
        """Replace the card with the same id, or insert it at the front."""
        for idx, existing in enumerate(self.cards):
            if existing.id == card.id:
                self.cards[idx] = card
                break
        else:
            self.cards.insert(0, card)
        self.persist()
        return card

    def delete(self, card_id: str) -> bool:
        before = len(self.cards)
        self.cards = [c for c in self.cards if c.id != card_id]
        removed = len(self.cards) != before
        if removed:
            self.persist()
        else:
            logger.warning("No card with id %s to delete", card_id)
        return removed

    def duplicate(self, card_id: str) -> Card:
        card = self.get(card_id)
        if card is None:
            raise KeyError(f"No card with id {card_id}")
        copy = replace(card, id=uuid.uuid4().hex, created_at=datetime.now(timezone.utc))
        self.cards.insert(0, copy)
        self.persist()
        return copy
