from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from .cards import Card, remaining_cards
from .equity import Hands, Tally, enumerate_boards, validate_deal
from .models import MIN_PLAYERS, NextCardResult, NextCardSummary

LOGGER = logging.getLogger("omaha_equity")

FAVORABLE_THRESHOLD = 60.0


def calc_next_card_equities(
    players: Hands,
    board: Sequence[Card],
    cancelled: Optional[Callable[[], bool]] = None,
) -> List[NextCardResult]:
    """Exact equity per player for each card that can come next.

    Only defined on the flop (turn pending) and the turn (river pending);
    any other board size returns an empty list.
    """
    hands = [list(hole) for hole in players]
    board = list(board)
    validate_deal(hands, board)
    if len(board) not in (3, 4):
        return []
    if len(hands) < MIN_PLAYERS or any(len(hole) < 2 for hole in hands):
        return []

    pool = remaining_cards(hands, board)
    LOGGER.debug("Next-card run: players=%s board=%s candidates=%s", len(hands), len(board), len(pool))
    results: List[NextCardResult] = []
    for card in pool:
        tally = Tally(len(hands))
        rest = [other for other in pool if other != card]
        enumerate_boards(hands, board + [card], rest, tally, cancelled)
        equities = tuple(round(value, 1) for value in tally.equities())
        results.append(NextCardResult(card=card, equities=equities))
    return results


def rank_next_cards(results: Sequence[NextCardResult], player: int, suit: Optional[str] = None) -> List[NextCardResult]:
    """Best cards for ``player`` first, optionally only one suit."""
    chosen = [item for item in results if suit is None or item.card.suit == suit]
    return sorted(chosen, key=lambda item: item.equities[player], reverse=True)


def summarize_next_cards(results: Sequence[NextCardResult], player: int) -> Optional[NextCardSummary]:
    if not results:
        return None
    values = [item.equities[player] for item in results]
    return NextCardSummary(
        best=max(values),
        worst=min(values),
        average=sum(values) / len(values),
        favorable=sum(1 for value in values if value > FAVORABLE_THRESHOLD),
    )
