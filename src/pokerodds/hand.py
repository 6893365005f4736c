"""Hand category classification for Texas Hold'em odds.

Classification here is by category membership only. There are no kickers and
no comparison between hands: a set of cards either makes a category or it
does not, and several categories can be made at once.
"""

from collections import Counter, defaultdict
from enum import IntEnum
from typing import Iterable, Sequence

from .card import Card, Suit


class HandCategory(IntEnum):
    """Poker hand categories from weakest to strongest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    TRIPS = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    QUADS = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        """Display name, e.g. 'Four of a Kind'."""
        return _LABELS[self]

    @property
    def frequency(self) -> str:
        """How often the category is the final hand in hold 'em."""
        return _FREQUENCIES[self]

    def __str__(self) -> str:
        return self.label


_LABELS = {
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.QUADS: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.TRIPS: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.PAIR: "Pair",
    HandCategory.HIGH_CARD: "High Card",
}

_FREQUENCIES = {
    HandCategory.STRAIGHT_FLUSH: "1 out of 3,217 hold 'em hands",
    HandCategory.QUADS: "1 out of 594 hold 'em hands",
    HandCategory.FULL_HOUSE: "1 out of 39 hold 'em hands",
    HandCategory.FLUSH: "1 out of 33 hold 'em hands",
    HandCategory.STRAIGHT: "1 out of 21 hold 'em hands",
    HandCategory.TRIPS: "1 out of 20 hold 'em hands",
    HandCategory.TWO_PAIR: "1 out of 4 hold 'em hands",
    HandCategory.PAIR: "1 out of 2.4 hold 'em hands",
    HandCategory.HIGH_CARD: "1 out of 5.7 hold 'em hands",
}

# Categories reported in an odds table, strongest first. High card is never
# tracked: every hand is at least high card.
ODDS_CATEGORIES: tuple[HandCategory, ...] = tuple(
    sorted((c for c in HandCategory if c is not HandCategory.HIGH_CARD), reverse=True)
)


def classify(cards: Sequence[Card]) -> frozenset[HandCategory]:
    """Return every category the cards make, independently of each other.

    A flush that is also a straight only counts as a straight flush when the
    straight is inside the flush suit. Fewer than two cards make nothing.
    """
    if len(cards) < 2:
        return frozenset()

    made: set[HandCategory] = set()

    by_suit: dict[Suit, list[int]] = defaultdict(list)
    for c in cards:
        by_suit[c.suit].append(c.rank.value)
    for ranks in by_suit.values():
        if len(ranks) >= 5:
            made.add(HandCategory.FLUSH)
            if is_straight(ranks):
                made.add(HandCategory.STRAIGHT_FLUSH)

    if is_straight([c.rank.value for c in cards]):
        made.add(HandCategory.STRAIGHT)

    counts = sorted(Counter(c.rank for c in cards).values(), reverse=True)
    top = counts[0]
    second = counts[1] if len(counts) > 1 else 0
    if top >= 4:
        made.add(HandCategory.QUADS)
    elif top == 3:
        made.add(HandCategory.TRIPS)
        if second >= 2:
            made.add(HandCategory.FULL_HOUSE)
    elif top == 2:
        made.add(HandCategory.PAIR)
        if second >= 2:
            made.add(HandCategory.TWO_PAIR)

    return frozenset(made)


def best_category(cards: Sequence[Card]) -> HandCategory:
    """Strongest category the cards make, or HIGH_CARD."""
    return max(classify(cards), default=HandCategory.HIGH_CARD)


def is_straight(ranks: Iterable[int]) -> bool:
    """Check whether the distinct ranks contain five consecutive values.

    The ace (14) also plays low, so A-2-3-4-5 (the wheel) is a straight.
    """
    values = sorted(set(ranks), reverse=True)
    if 14 in values:
        values.append(1)

    run = 1
    for high, low in zip(values, values[1:]):
        if high - low == 1:
            run += 1
            if run >= 5:
                return True
        else:
            run = 1
    return False
