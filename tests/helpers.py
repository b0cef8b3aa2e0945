from __future__ import annotations

import functools
import itertools
import random
from typing import List, Optional, Sequence, Tuple

from omaha.cards import Card, build_deck, parse_card_text
from omaha.evaluator import HandEvaluation, compare_hands, evaluate_five


def cards(text: str) -> List[Card]:
    return parse_card_text(text)


def hands(*texts: str) -> List[List[Card]]:
    return [parse_card_text(text) for text in texts]


def brute_force_best(hole: Sequence[Card], board: Sequence[Card]) -> Optional[HandEvaluation]:
    """Oracle: score every 2-hole x 3-board hand and keep the strongest."""
    scored = [
        evaluate_five(list(pair) + list(triple))
        for pair, triple in itertools.product(itertools.combinations(hole, 2), itertools.combinations(board, 3))
    ]
    if not scored:
        return None
    return max(scored, key=functools.cmp_to_key(compare_hands))


def random_deal(seed: int, players: int, hole_size: int, board_size: int) -> Tuple[List[List[Card]], List[Card]]:
    """Deal distinct cards from a seeded shuffle."""
    deck = build_deck()
    random.Random(seed).shuffle(deck)
    dealt = [deck[idx * hole_size : (idx + 1) * hole_size] for idx in range(players)]
    start = players * hole_size
    return dealt, deck[start : start + board_size]


def equity_sum(results) -> float:
    return sum(result.win + result.tie / 2 for result in results)
