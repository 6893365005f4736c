"""Odds of making at least each hand category by a target street."""

import logging
import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from .card import Card, ensure_distinct
from .config import DEFAULT_SIMULATION, SimulationConfig
from .deck import Deck
from .hand import ODDS_CATEGORIES, HandCategory, best_category
from .runouts import enumerate_runouts, sample_runouts
from .stage import Street, resolve_stage, suggest_street
from .tally import OddsTally

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OddsResult:
    """Result of an odds calculation."""

    street: Street
    percentages: Mapping[HandCategory, float]  # Chance of at least this category (0-100)
    runs: int                                  # Number of runouts tallied
    exact: bool                                # Every runout enumerated, no sampling

    def percent(self, category: HandCategory) -> float:
        """Percentage for one category. High card is always 100."""
        if category is HandCategory.HIGH_CARD:
            return 100.0
        return self.percentages[category]

    def items(self) -> list[tuple[HandCategory, float]]:
        """(category, percentage) pairs, strongest category first."""
        return [(category, self.percentages[category]) for category in ODDS_CATEGORIES]


def compute_odds(
    hole: Sequence[Card | None],
    board: Sequence[Card | None] = (),
    street: Street | None = None,
    *,
    config: SimulationConfig | None = None,
    rng: random.Random | None = None,
) -> OddsResult | None:
    """Calculate the chance of holding at least each category by `street`.

    Args:
        hole: The 2 hole card slots (None for an unknown card)
        board: Up to 5 board slots in deal order (None for an unknown card)
        street: Target street, or None to pick one from the board
        config: Simulation settings, defaults to 5000 trials / exact up to 2 cards
        rng: Random source for sampled runouts

    Returns:
        OddsResult, or None while either hole card is still unknown
    """
    if len(hole) != 2:
        raise ValueError(f"Hole must have 2 slots, got {len(hole)}")
    if any(c is None for c in hole):
        return None

    config = config or DEFAULT_SIMULATION
    board = list(board) + [None] * (5 - len(board))
    selected = [c for c in [*hole, *board] if c is not None]
    ensure_distinct(selected)

    if street is None:
        street = suggest_street(board)
    stage = resolve_stage(hole, board, street)
    deck = Deck.available(selected)

    tally = OddsTally()
    known = list(stage.known)
    exact = stage.cards_needed <= config.exact_max_needed
    if stage.is_complete:
        tally.add(known)
    elif exact:
        for runout in enumerate_runouts(deck, stage.cards_needed):
            tally.add(known + list(runout))
    else:
        for runout in sample_runouts(deck, stage.cards_needed, config.trials, rng):
            tally.add(known + list(runout))

    logger.debug(
        "%s odds: %d known, %d needed, %d %s runs",
        street,
        len(known),
        max(stage.cards_needed, 0),
        tally.runs,
        "exact" if exact else "sampled",
    )

    return OddsResult(
        street=street,
        percentages=MappingProxyType(tally.percentages()),
        runs=tally.runs,
        exact=exact,
    )


def classify_best_hand(cards: Sequence[Card]) -> HandCategory:
    """Best category made by the known cards, or HIGH_CARD.

    Meant for a finished hand (2 hole + 5 board), but any set of distinct
    cards is accepted.
    """
    cards = list(cards)
    ensure_distinct(cards)
    return best_category(cards)
