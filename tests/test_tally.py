"""Tests for cumulative odds tallying."""

import pytest
from pokerodds.card import card
from pokerodds.hand import ODDS_CATEGORIES, HandCategory
from pokerodds.tally import OddsTally


def cards(s: str):
    return [card(part) for part in s.split()]


class TestOddsTally:
    def test_starts_empty(self):
        tally = OddsTally()
        assert tally.runs == 0
        assert set(tally.hits) == set(ODDS_CATEGORIES)
        assert all(v == 0 for v in tally.hits.values())

    def test_full_house_credits_every_weaker_category(self):
        tally = OddsTally()
        best = tally.add(cards("As Ad Ah Kc Ks"))
        assert best == HandCategory.FULL_HOUSE
        assert tally.hits[HandCategory.STRAIGHT_FLUSH] == 0
        assert tally.hits[HandCategory.QUADS] == 0
        for category in ODDS_CATEGORIES[2:]:
            assert tally.hits[category] == 1

    def test_flush_counts_towards_pair(self):
        """A flush with no paired rank is still tallied as at least a pair."""
        tally = OddsTally()
        tally.add(cards("As Ks 9s 5s 2s"))
        assert tally.hits[HandCategory.FLUSH] == 1
        assert tally.hits[HandCategory.STRAIGHT] == 1
        assert tally.hits[HandCategory.PAIR] == 1
        assert tally.hits[HandCategory.FULL_HOUSE] == 0

    def test_high_card_counts_a_run_only(self):
        tally = OddsTally()
        assert tally.add(cards("As Kd 9h 5c 2s")) == HandCategory.HIGH_CARD
        assert tally.runs == 1
        assert all(v == 0 for v in tally.hits.values())

    def test_percentages(self):
        tally = OddsTally()
        tally.add(cards("As Ad Kh 5c 2s"))      # pair
        tally.add(cards("As Ad Ah 5c 2s"))      # trips
        tally.add(cards("As Kd 9h 5c 2s"))      # high card
        tally.add(cards("9s 8s 7s 6s 5s"))      # straight flush
        pct = tally.percentages()
        assert pct[HandCategory.PAIR] == 75.0
        assert pct[HandCategory.TWO_PAIR] == 50.0
        assert pct[HandCategory.TRIPS] == 50.0
        assert pct[HandCategory.STRAIGHT] == 25.0
        assert pct[HandCategory.STRAIGHT_FLUSH] == 25.0

    def test_percentages_non_increasing_by_strength(self):
        tally = OddsTally()
        for hand in ["As Ad Kh 5c 2s", "As Ks 9s 5s 2s", "As Ad Ah Ac 2s", "3c 4d 5h 6s 7c"]:
            tally.add(cards(hand))
        values = [tally.percentages()[c] for c in ODDS_CATEGORIES]
        assert values == sorted(values)

    def test_no_runs(self):
        with pytest.raises(ValueError):
            OddsTally().percentages()
