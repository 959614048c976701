"""In-memory card collection and its displayed view."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, List, Optional, Tuple

from flashdeck.errors import CardNotFoundError, DuplicateCardError
from flashdeck.model.card import Card
from flashdeck.model.filters import PREDICATE_SHOW_ALL_CARDS, CardPredicate
from flashdeck.model.goal import Goal

LOGGER = logging.getLogger(__name__)


class Model:
    """Owns the authoritative card list, the active filter and the session goal.

    The collection keeps insertion order and never holds two cards with the
    same question and answer. ``filtered_cards`` is rebuilt every time the
    collection or the predicate changes.
    """

    def __init__(
        self,
        cards: Iterable[Card] = (),
        *,
        goal: Optional[Goal] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._cards: List[Card] = []
        self._predicate: CardPredicate = PREDICATE_SHOW_ALL_CARDS
        self._filtered: List[Card] = []
        self.goal = goal if goal is not None else Goal()
        self._clock = clock
        self.set_cards(cards)

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------
    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def has_card(self, card: Card) -> bool:
        return any(existing.is_same_card(card) for existing in self._cards)

    def add_card(self, card: Card) -> None:
        if self.has_card(card):
            raise DuplicateCardError("This card already exists in the Deck.")
        self._cards.append(card)
        self._refresh()

    def delete_card(self, card: Card) -> None:
        position = self._position_of(card)
        del self._cards[position]
        self._refresh()

    def set_card(self, target: Card, edited: Card) -> None:
        """Replace ``target`` with ``edited`` at the same position."""
        position = self._position_of(target)
        if not target.is_same_card(edited) and self.has_card(edited):
            raise DuplicateCardError("This card already exists in the Deck.")
        self._cards[position] = edited
        self._refresh()

    def set_cards(self, cards: Iterable[Card]) -> None:
        replacement: List[Card] = []
        for card in cards:
            if any(existing.is_same_card(card) for existing in replacement):
                raise DuplicateCardError("This card already exists in the Deck.")
            replacement.append(card)
        self._cards = replacement
        self._refresh()

    def clear(self) -> None:
        self.set_cards(())

    def _position_of(self, card: Card) -> int:
        for position, existing in enumerate(self._cards):
            if existing is card:
                return position
        for position, existing in enumerate(self._cards):
            if existing == card:
                return position
        raise CardNotFoundError("The card is not in the Deck.")

    # ------------------------------------------------------------------
    # Displayed view
    # ------------------------------------------------------------------
    @property
    def predicate(self) -> CardPredicate:
        return self._predicate

    @property
    def filtered_cards(self) -> Tuple[Card, ...]:
        return tuple(self._filtered)

    def update_filtered_card_list(self, predicate: CardPredicate) -> None:
        self._predicate = predicate
        self._refresh()

    def _refresh(self) -> None:
        self._filtered = [card for card in self._cards if self._predicate(card)]
        LOGGER.debug("Displayed view holds %d of %d cards", len(self._filtered), len(self._cards))

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    def today(self) -> date:
        return self._clock()
