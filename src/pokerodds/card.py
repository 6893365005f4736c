"""Card representations for the odds engine."""

from enum import IntEnum
from dataclasses import dataclass
from typing import Iterable, Self


class Suit(IntEnum):
    """Card suits. Only used for flush detection."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        """Unicode symbol for the suit."""
        return ["♣", "♦", "♥", "♠"][self.value]

    @property
    def is_red(self) -> bool:
        return self in (Suit.DIAMONDS, Suit.HEARTS)

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. The value is the numeric rank used by the classifier (Ace = 14)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """Single-character symbol for the rank."""
        if self.value < 10:
            return str(self.value)
        return {10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    def __str__(self) -> str:
        return self.symbol


_SUIT_CHARS = {
    "C": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "S": Suit.SPADES,
    "♣": Suit.CLUBS,
    "♦": Suit.DIAMONDS,
    "♥": Suit.HEARTS,
    "♠": Suit.SPADES,
}

_RANK_STRINGS = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}


@dataclass(frozen=True, slots=True)
class Card:
    """A playing card. Identity is the (rank, suit) pair."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank.symbol}{self.suit.symbol})"

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse a card from string like 'As', 'Kh', 'Td', '10d', '2♣'.

        Rank: 2-10, T, J, Q, K, A
        Suit: c(lubs), d(iamonds), h(earts), s(pades) or the suit symbol
        """
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        suit_char = s[-1]
        if suit_char not in _SUIT_CHARS:
            raise ValueError(f"Invalid suit: {suit_char}")

        rank_str = s[:-1]
        if rank_str not in _RANK_STRINGS:
            raise ValueError(f"Invalid rank: {rank_str}")

        return cls(rank=_RANK_STRINGS[rank_str], suit=_SUIT_CHARS[suit_char])


def card(s: str) -> Card:
    """Shorthand for Card.from_str()."""
    return Card.from_str(s)


def parse_cards(s: str) -> list[Card]:
    """Parse space or comma separated cards, e.g. 'As Kh, 2c'."""
    return [card(part) for part in s.replace(",", " ").split()]


def ensure_distinct(cards: Iterable[Card]) -> None:
    """Raise ValueError if any card appears more than once."""
    seen: set[Card] = set()
    for c in cards:
        if c in seen:
            raise ValueError(f"Card {c} is selected more than once")
        seen.add(c)
