"""Streets and the cards that count towards each of them."""

from dataclasses import dataclass
from enum import Enum
from typing import Self, Sequence

from .card import Card

HOLE_SLOTS = 2
BOARD_SLOTS = 5


class Street(Enum):
    """Target street, valued by the total number of cards (hole + board) it shows."""

    FLOP = 5
    TURN = 6
    RIVER = 7

    @property
    def card_count(self) -> int:
        return self.value

    @property
    def board_slots(self) -> int:
        """How many board slots are dealt by this street."""
        return self.value - HOLE_SLOTS

    @classmethod
    def parse(cls, s: str) -> Self:
        """Parse a street name like 'flop' or 'River'."""
        try:
            return cls[s.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown street: {s!r} (expected flop, turn or river)") from None

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class StageView:
    """Known cards relevant to a street and how many more it still needs."""

    street: Street
    known: tuple[Card, ...]
    cards_needed: int

    @property
    def is_complete(self) -> bool:
        """True when nothing remains to be drawn for this street."""
        return self.cards_needed <= 0


def resolve_stage(
    hole: Sequence[Card | None],
    board: Sequence[Card | None],
    street: Street,
) -> StageView:
    """Select the known cards that matter for `street`.

    Board cards dealt after the street are ignored even when filled, so the
    flop odds of a hand stay the same once the turn and river are known.
    """
    if not isinstance(street, Street):
        raise ValueError(f"Unknown street: {street!r}")
    if len(hole) != HOLE_SLOTS:
        raise ValueError(f"Hole must have {HOLE_SLOTS} slots, got {len(hole)}")
    if len(board) > BOARD_SLOTS:
        raise ValueError(f"Board can have at most {BOARD_SLOTS} slots, got {len(board)}")

    relevant = list(hole) + list(board[: street.board_slots])
    known = tuple(c for c in relevant if c is not None)
    return StageView(
        street=street,
        known=known,
        cards_needed=street.card_count - len(known),
    )


def suggest_street(board: Sequence[Card | None]) -> Street:
    """Default target street for the number of board cards already known."""
    filled = sum(1 for c in board if c is not None)
    if filled >= 4:
        return Street.RIVER
    if filled == 3:
        return Street.TURN
    return Street.FLOP
