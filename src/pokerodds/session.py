"""A hand being entered card by card, with odds recomputed after each edit.

Edits arriving within the settle delay of each other collapse into a single
computation. A computation that finishes after a newer edit is dropped, so a
slow result can never overwrite a fresher one. Listeners are called with the
session lock held and may edit the session from inside the callback.

`odds` is only meaningful once `pending` is False (see `wait()`). A failed
computation leaves `odds` as None and records the exception in `error`.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from .calculator import OddsResult, classify_best_hand, compute_odds
from .card import Card
from .config import DEFAULT_SIMULATION, SessionConfig, SimulationConfig
from .hand import HandCategory
from .stage import BOARD_SLOTS, HOLE_SLOTS, Street, suggest_street

logger = logging.getLogger(__name__)

OddsListener = Callable[[OddsResult | None], None]


class HandSession:
    """Hole and board slots for one hand plus the latest odds for them."""

    def __init__(
        self,
        simulation: SimulationConfig | None = None,
        session: SessionConfig | None = None,
        on_odds: OddsListener | None = None,
    ) -> None:
        self.simulation = simulation or DEFAULT_SIMULATION
        self.settle_delay = (session or SessionConfig()).settle_delay
        self.on_odds = on_odds

        self.hole: list[Card | None] = [None] * HOLE_SLOTS
        self.board: list[Card | None] = [None] * BOARD_SLOTS
        self.odds: OddsResult | None = None
        self.error: Exception | None = None  # Set when the latest computation failed
        self._manual_street: Street | None = None

        self._lock = threading.RLock()
        self._generation = 0
        self._timer: threading.Timer | None = None
        self._settled = threading.Event()
        self._settled.set()

    # ── Editing ──────────────────────────────────────────────

    @property
    def street(self) -> Street:
        """Street the odds are shown for: the user's pick, or one suggested by the board."""
        return self._manual_street or suggest_street(self.board)

    @property
    def selected(self) -> list[Card]:
        return [c for c in self.hole + self.board if c is not None]

    def set_hole(self, index: int, c: Card) -> None:
        self._place(self.hole, index, c)

    def set_board(self, index: int, c: Card) -> None:
        self._place(self.board, index, c)

    def clear_hole(self, index: int) -> None:
        self._clear(self.hole, index)

    def clear_board(self, index: int) -> None:
        self._clear(self.board, index)

    def choose_street(self, street: Street) -> None:
        """Pin the target street instead of following the board."""
        if not isinstance(street, Street):
            raise ValueError(f"Unknown street: {street!r}")
        with self._lock:
            self._manual_street = street
            self._schedule()

    def _place(self, slots: list[Card | None], index: int, c: Card) -> None:
        with self._lock:
            if slots[index] != c and c in self.selected:
                raise ValueError(f"Card {c} is already selected")
            slots[index] = c
            self._schedule()

    def _clear(self, slots: list[Card | None], index: int) -> None:
        with self._lock:
            slots[index] = None
            self._manual_street = None
            self._schedule()

    # ── Results ──────────────────────────────────────────────

    @property
    def best_hand(self) -> HandCategory | None:
        """Final hand category once all seven cards are known."""
        if any(c is None for c in self.hole + self.board):
            return None
        return classify_best_hand(self.selected)

    @property
    def pending(self) -> bool:
        """True while an edit is waiting to be computed.

        `odds` is None both while pending and when the hole is incomplete;
        check this first to tell the two apart.
        """
        return not self._settled.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the latest edit has been computed. False on timeout."""
        return self._settled.wait(timeout)

    def cancel(self) -> None:
        """Drop any pending computation."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._settled.set()

    def _schedule(self) -> None:
        with self._lock:
            hole = list(self.hole)
            board = list(self.board)
            street = self.street

            self._generation += 1
            generation = self._generation
            if self._timer is not None:
                self._timer.cancel()
            self._settled.clear()
            self.odds = None
            self.error = None
            self._timer = threading.Timer(
                self.settle_delay, self._run, args=(generation, hole, board, street)
            )
            self._timer.daemon = True
            self._timer.start()

    def _run(
        self,
        generation: int,
        hole: list[Card | None],
        board: list[Card | None],
        street: Street,
    ) -> None:
        try:
            try:
                result = compute_odds(hole, board, street, config=self.simulation)
            except Exception as e:
                logger.exception("Odds computation failed for %s", street)
                with self._lock:
                    if generation == self._generation:
                        self.error = e
                        self._timer = None
                return

            with self._lock:
                if generation != self._generation:
                    logger.debug(
                        "Discarding stale odds (generation %d < %d)", generation, self._generation
                    )
                    return
                self.odds = result
                self._timer = None
                if self.on_odds is not None:
                    self.on_odds(result)
        finally:
            with self._lock:
                if generation == self._generation:
                    self._settled.set()
