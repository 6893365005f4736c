"""Cumulative "at least this hand" counters."""

from dataclasses import dataclass, field
from typing import Sequence

from .card import Card
from .hand import ODDS_CATEGORIES, HandCategory, best_category


@dataclass
class OddsTally:
    """Running hit counts for one odds calculation.

    Each sample is credited to its best category and to every weaker
    category, so hits never decrease from Straight Flush down to Pair.
    """

    hits: dict[HandCategory, int] = field(
        default_factory=lambda: {category: 0 for category in ODDS_CATEGORIES}
    )
    runs: int = 0

    def add(self, cards: Sequence[Card]) -> HandCategory:
        """Classify one composite hand and count it. Returns its best category."""
        best = best_category(cards)
        for category in ODDS_CATEGORIES:
            if category <= best:
                self.hits[category] += 1
        self.runs += 1
        return best

    def percentages(self) -> dict[HandCategory, float]:
        """Hit rate per category as a percentage of runs."""
        if self.runs == 0:
            raise ValueError("No runs tallied")

        result: dict[HandCategory, float] = {}
        for category in ODDS_CATEGORIES:
            pct = 100 * self.hits[category] / self.runs
            assert 0.0 <= pct <= 100.0, f"{category.name} at {pct}%"
            result[category] = pct
        return result
