from __future__ import annotations

import itertools
import logging
import random
from typing import Callable, List, Optional, Sequence

from .cards import Card, remaining_cards, shuffle
from .combinatorics import count_combinations
from .evaluator import BoardResult, evaluate_board
from .models import (
    BOARD_SIZE,
    DEFAULT_SAMPLE_COUNT,
    MAX_HOLE_CARDS,
    MAX_PLAYERS,
    MIN_PLAYERS,
    MIN_SAMPLE_COUNT,
    EquityResult,
    GameType,
    Method,
)

LOGGER = logging.getLogger("omaha_equity")

# Boards evaluated between two polls of the cancellation callback.
CHECK_EVERY = 256

Hands = Sequence[Sequence[Card]]


class CalculationCancelled(RuntimeError):
    """Raised when the caller asked an in-flight calculation to stop."""


def validate_deal(players: Hands, board: Sequence[Card]) -> None:
    """Reject deals that cannot come from one deck."""
    if len(players) > MAX_PLAYERS:
        raise ValueError(f"At most {MAX_PLAYERS} players supported, got {len(players)}")
    if len(board) > BOARD_SIZE:
        raise ValueError(f"Board holds at most {BOARD_SIZE} cards, got {len(board)}")
    seen = set()
    for seat, hole in enumerate(players):
        if len(hole) > MAX_HOLE_CARDS:
            raise ValueError(f"Player {seat} holds {len(hole)} cards, at most {MAX_HOLE_CARDS} allowed")
        for card in hole:
            if card in seen:
                raise ValueError(f"Duplicate card: {card.label}")
            seen.add(card)
    for card in board:
        if card in seen:
            raise ValueError(f"Duplicate card: {card.label}")
        seen.add(card)


def can_calculate(players: Hands, board: Sequence[Card], game_type: Optional[GameType] = None) -> bool:
    """True when every hand is complete for the game and the deal is legal."""
    if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
        return False
    sizes = {len(hole) for hole in players}
    if game_type is not None:
        if sizes != {int(game_type)}:
            return False
    elif len(sizes) != 1 or sizes.pop() not in {gt.value for gt in GameType}:
        return False
    try:
        validate_deal(players, board)
    except ValueError:
        return False
    return True


def choose_method(unseen: int, need: int, exact_limit: Optional[int] = None) -> Method:
    """Exact enumeration with two or fewer cards to come, sampling otherwise.

    With ``exact_limit`` the size of the enumeration decides instead.
    """
    if need == 0:
        return Method.EXACT
    if exact_limit is None:
        return Method.EXACT if need <= 2 else Method.MONTE_CARLO
    if count_combinations(unseen, need) <= exact_limit:
        return Method.EXACT
    return Method.MONTE_CARLO


class Tally:
    """Win and split counters across evaluated boards."""

    def __init__(self, players: int) -> None:
        self.wins = [0] * players
        self.ties = [0] * players
        self.total = 0

    def record(self, result: BoardResult) -> None:
        if len(result.tied) == 1:
            self.wins[result.winner] += 1
        else:
            for idx in result.tied:
                self.ties[idx] += 1
        self.total += 1

    def equities(self) -> List[float]:
        return [(win + tie / 2) / self.total * 100 for win, tie in zip(self.wins, self.ties)]

    def results(self, method: Method) -> List[EquityResult]:
        return [
            EquityResult(
                win=win / self.total * 100,
                tie=tie / self.total * 100,
                equity=(win + tie / 2) / self.total * 100,
                total=self.total,
                method=method,
            )
            for win, tie in zip(self.wins, self.ties)
        ]


def enumerate_boards(
    players: Hands,
    board: Sequence[Card],
    pool: Sequence[Card],
    tally: Tally,
    cancelled: Optional[Callable[[], bool]] = None,
) -> None:
    """Evaluate every completion of ``board`` drawn from ``pool``."""
    need = BOARD_SIZE - len(board)
    base = tuple(board)
    for count, extra in enumerate(itertools.combinations(pool, need)):
        if cancelled is not None and count % CHECK_EVERY == 0 and cancelled():
            raise CalculationCancelled("Exact enumeration cancelled")
        tally.record(evaluate_board(players, base + extra))


def sample_boards(
    players: Hands,
    board: Sequence[Card],
    pool: Sequence[Card],
    tally: Tally,
    sample_count: int,
    rng: Optional[random.Random] = None,
    cancelled: Optional[Callable[[], bool]] = None,
) -> None:
    need = BOARD_SIZE - len(board)
    base = list(board)
    for count in range(sample_count):
        if cancelled is not None and count % CHECK_EVERY == 0 and cancelled():
            raise CalculationCancelled("Monte Carlo sampling cancelled")
        tally.record(evaluate_board(players, base + shuffle(pool, rng)[:need]))


def run_calc(
    players: Hands,
    board: Sequence[Card],
    sample_count: int = DEFAULT_SAMPLE_COUNT,
    *,
    rng: Optional[random.Random] = None,
    exact_limit: Optional[int] = None,
    cancelled: Optional[Callable[[], bool]] = None,
) -> List[EquityResult]:
    """Win, tie and equity percentages for every player.

    Returns an empty list while there is not enough to evaluate: fewer than
    two players or a hand with fewer than two cards.
    """
    hands = [list(hole) for hole in players]
    board = list(board)
    validate_deal(hands, board)
    if sample_count < MIN_SAMPLE_COUNT:
        raise ValueError(f"Sample count must be at least {MIN_SAMPLE_COUNT}, got {sample_count}")
    if exact_limit is not None and exact_limit < 1:
        raise ValueError(f"Exact limit must be at least 1, got {exact_limit}")
    if len(hands) < MIN_PLAYERS or any(len(hole) < 2 for hole in hands):
        LOGGER.debug("Skipping equity run: %s hands not ready", len(hands))
        return []

    pool = remaining_cards(hands, board)
    need = BOARD_SIZE - len(board)
    method = choose_method(len(pool), need, exact_limit)
    LOGGER.debug("Equity run: players=%s board=%s need=%s method=%s", len(hands), len(board), need, method.value)

    tally = Tally(len(hands))
    if method == Method.EXACT:
        enumerate_boards(hands, board, pool, tally, cancelled)
    else:
        sample_boards(hands, board, pool, tally, sample_count, rng, cancelled)

    LOGGER.debug("Equity run finished after %s boards", tally.total)
    return tally.results(method)
