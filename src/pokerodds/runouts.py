"""Runout generation: every possible draw, or a fixed number of random ones."""

import random
from itertools import combinations
from typing import Iterator

from .card import Card
from .deck import Deck

Runout = tuple[Card, ...]


def enumerate_runouts(deck: Deck, k: int) -> Iterator[Runout]:
    """Yield every distinct k-card subset of the deck exactly once.

    There are C(len(deck), k) of them. k == 0 yields a single empty runout.
    """
    if k < 0:
        raise ValueError(f"Cannot draw {k} cards")
    if k > len(deck):
        raise ValueError(f"Cannot draw {k} cards, only {len(deck)} remaining")
    yield from combinations(deck.cards, k)


def sample_runouts(
    deck: Deck,
    k: int,
    trials: int,
    rng: random.Random | None = None,
) -> Iterator[Runout]:
    """Yield `trials` independent k-card draws without replacement.

    Each draw is a uniformly random k-subset of the deck. Cards within a draw
    come out in random order; callers only care about the set.
    """
    if k < 0:
        raise ValueError(f"Cannot draw {k} cards")
    if k > len(deck):
        raise ValueError(f"Cannot draw {k} cards, only {len(deck)} remaining")
    if trials < 1:
        raise ValueError(f"Need at least one trial, got {trials}")

    rng = rng or random.Random()
    cards = deck.cards
    for _ in range(trials):
        yield tuple(rng.sample(cards, k))
