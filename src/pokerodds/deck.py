"""The 52-card universe and the deck of cards still available to draw."""

from dataclasses import dataclass
from typing import Iterable, Iterator

from .card import Card, Rank, Suit

FULL_DECK: tuple[Card, ...] = tuple(Card(rank, suit) for suit in Suit for rank in Rank)


@dataclass(frozen=True)
class Deck:
    """Cards not yet selected, in universe order."""

    cards: tuple[Card, ...] = FULL_DECK

    @classmethod
    def available(cls, selected: Iterable[Card | None]) -> "Deck":
        """Universe minus every selected card. Empty slots (None) are skipped."""
        taken = {c for c in selected if c is not None}
        return cls(tuple(c for c in FULL_DECK if c not in taken))

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card: Card) -> bool:
        return card in self.cards
