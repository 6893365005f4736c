"""Pokerodds - Texas Hold'em odds of making each hand by the flop, turn or river."""

__version__ = "0.1.0"

from .calculator import OddsResult, classify_best_hand, compute_odds
from .card import Card, Rank, Suit, card, parse_cards
from .config import Config, SessionConfig, SimulationConfig
from .deck import FULL_DECK, Deck
from .hand import ODDS_CATEGORIES, HandCategory, best_category, classify, is_straight
from .runouts import enumerate_runouts, sample_runouts
from .session import HandSession
from .stage import StageView, Street, resolve_stage, suggest_street
from .tally import OddsTally

__all__ = [
    "Card",
    "Config",
    "Deck",
    "FULL_DECK",
    "HandCategory",
    "HandSession",
    "ODDS_CATEGORIES",
    "OddsResult",
    "OddsTally",
    "Rank",
    "SessionConfig",
    "SimulationConfig",
    "StageView",
    "Street",
    "Suit",
    "best_category",
    "card",
    "classify",
    "classify_best_hand",
    "compute_odds",
    "enumerate_runouts",
    "is_straight",
    "parse_cards",
    "resolve_stage",
    "sample_runouts",
    "suggest_street",
]
