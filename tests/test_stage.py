"""Tests for streets and stage resolution."""

import pytest
from pokerodds.card import card
from pokerodds.stage import Street, resolve_stage, suggest_street

HOLE = [card("As"), card("Ah")]
FULL_BOARD = [card("Kd"), card("7c"), card("2s"), card("Ad"), card("Ac")]


class TestStreet:
    def test_card_counts(self):
        assert Street.FLOP.card_count == 5
        assert Street.TURN.card_count == 6
        assert Street.RIVER.card_count == 7

    def test_board_slots(self):
        assert Street.FLOP.board_slots == 3
        assert Street.RIVER.board_slots == 5

    def test_parse(self):
        assert Street.parse("flop") == Street.FLOP
        assert Street.parse(" River ") == Street.RIVER

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown street"):
            Street.parse("preflop")

    def test_str(self):
        assert str(Street.TURN) == "Turn"


class TestResolveStage:
    def test_flop_ignores_turn_and_river(self):
        stage = resolve_stage(HOLE, FULL_BOARD, Street.FLOP)
        assert stage.known == (card("As"), card("Ah"), card("Kd"), card("7c"), card("2s"))
        assert stage.cards_needed == 0
        assert stage.is_complete

    def test_turn_uses_four_slots(self):
        stage = resolve_stage(HOLE, FULL_BOARD, Street.TURN)
        assert card("Ad") in stage.known
        assert card("Ac") not in stage.known
        assert stage.cards_needed == 0

    def test_nothing_on_board(self):
        stage = resolve_stage(HOLE, [None] * 5, Street.RIVER)
        assert stage.known == tuple(HOLE)
        assert stage.cards_needed == 5

    def test_short_board(self):
        stage = resolve_stage(HOLE, FULL_BOARD[:3], Street.RIVER)
        assert stage.cards_needed == 2

    def test_empty_slots_inside_street(self):
        board = [card("Kd"), None, card("2s"), card("Ad"), None]
        stage = resolve_stage(HOLE, board, Street.TURN)
        assert len(stage.known) == 5
        assert stage.cards_needed == 1

    def test_missing_hole_card_is_not_known(self):
        stage = resolve_stage([card("As"), None], [], Street.FLOP)
        assert stage.known == (card("As"),)
        assert stage.cards_needed == 4

    def test_rejects_unknown_street(self):
        with pytest.raises(ValueError):
            resolve_stage(HOLE, [], "flop")  # type: ignore[arg-type]

    def test_rejects_bad_slot_counts(self):
        with pytest.raises(ValueError):
            resolve_stage([card("As")], [], Street.FLOP)
        with pytest.raises(ValueError):
            resolve_stage(HOLE, FULL_BOARD + [card("3h")], Street.RIVER)


class TestSuggestStreet:
    def test_empty_board(self):
        assert suggest_street([None] * 5) == Street.FLOP
        assert suggest_street([]) == Street.FLOP

    def test_partial_flop(self):
        assert suggest_street(FULL_BOARD[:2]) == Street.FLOP

    def test_flop_dealt(self):
        assert suggest_street(FULL_BOARD[:3] + [None, None]) == Street.TURN

    def test_turn_dealt(self):
        assert suggest_street(FULL_BOARD[:4]) == Street.RIVER

    def test_river_dealt(self):
        assert suggest_street(FULL_BOARD) == Street.RIVER
