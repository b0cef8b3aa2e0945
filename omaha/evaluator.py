from __future__ import annotations

import functools
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence, Tuple

from .cards import Card, VALUE_RANK
from .combinatorics import combinations


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


@functools.total_ordering
@dataclass(frozen=True)
class HandEvaluation:
    """Score of a single 5-card hand.

    ``primary`` is the rank that defines the category (quad, trips or pair
    rank, straight or flush high card, top card); ``kickers`` holds the
    remaining ranks that still matter, highest first.
    """

    category: HandCategory
    primary: int
    kickers: Tuple[int, ...] = ()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return compare_hands(self, other) < 0

    @property
    def name(self) -> str:
        return describe_rank(self.category)

    def describe(self) -> str:
        top = _rank_name(self.primary)
        if self.category == HandCategory.STRAIGHT_FLUSH:
            return "Royal flush" if self.primary == 14 else f"Straight flush, {top} high"
        if self.category == HandCategory.FOUR_OF_A_KIND:
            return f"Four of a kind, {top}s"
        if self.category == HandCategory.FULL_HOUSE:
            return f"Full house, {top}s full of {_rank_name(self.kickers[0])}s"
        if self.category == HandCategory.FLUSH:
            return f"Flush, {top} high"
        if self.category == HandCategory.STRAIGHT:
            return f"Straight, {top} high"
        if self.category == HandCategory.THREE_OF_A_KIND:
            return f"Three of a kind, {top}s"
        if self.category == HandCategory.TWO_PAIR:
            return f"Two pair, {top}s and {_rank_name(self.kickers[0])}s"
        if self.category == HandCategory.PAIR:
            return f"Pair of {top}s"
        return f"High card, {top}"


@dataclass(frozen=True)
class BoardResult:
    winner: int
    tied: Tuple[int, ...]

    @property
    def is_tie(self) -> bool:
        return len(self.tied) > 1


def describe_rank(category: int) -> str:
    return HandCategory(category).name.lower()


def _rank_name(value: int) -> str:
    return {14: "Ace", 13: "King", 12: "Queen", 11: "Jack", 10: "Ten"}.get(value, VALUE_RANK.get(value, str(value)))


def evaluate_five(cards: Sequence[Card]) -> HandEvaluation:
    if len(cards) != 5:
        raise ValueError(f"Hand evaluation requires exactly 5 cards, got {len(cards)}")

    ranks = sorted((card.value for card in cards), reverse=True)
    is_flush = len({card.suit for card in cards}) == 1
    top_of_straight = straight_high(ranks)

    counts = Counter(ranks)
    # (count desc, value desc): quads/trips/pairs lead, singles trail.
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    pattern = "".join(str(count) for _, count in groups)

    if top_of_straight and is_flush:
        return HandEvaluation(HandCategory.STRAIGHT_FLUSH, top_of_straight)
    if pattern[0] == "4":
        return HandEvaluation(HandCategory.FOUR_OF_A_KIND, groups[0][0], (groups[1][0],))
    if pattern == "32":
        return HandEvaluation(HandCategory.FULL_HOUSE, groups[0][0], (groups[1][0],))
    if is_flush:
        return HandEvaluation(HandCategory.FLUSH, ranks[0], tuple(ranks))
    if top_of_straight:
        return HandEvaluation(HandCategory.STRAIGHT, top_of_straight)
    if pattern[0] == "3":
        return HandEvaluation(HandCategory.THREE_OF_A_KIND, groups[0][0], tuple(v for v, _ in groups[1:]))
    if pattern.startswith("22"):
        return HandEvaluation(HandCategory.TWO_PAIR, groups[0][0], (groups[1][0], groups[2][0]))
    if pattern[0] == "2":
        return HandEvaluation(HandCategory.PAIR, groups[0][0], tuple(v for v, _ in groups[1:]))
    return HandEvaluation(HandCategory.HIGH_CARD, ranks[0], tuple(ranks))


def straight_high(ranks: Sequence[int]) -> int:
    """High card of the straight formed by ``ranks``, 0 when there is none."""
    unique = sorted(set(ranks), reverse=True)
    if len(unique) < 5:
        return 0
    for idx in range(len(unique) - 4):
        if unique[idx] - unique[idx + 4] == 4:
            return unique[idx]
    if {14, 5, 4, 3, 2}.issubset(unique):  # wheel
        return 5
    return 0


def compare_hands(a: HandEvaluation, b: HandEvaluation) -> int:
    """Negative if ``a`` loses to ``b``, zero on a split, positive if it wins."""
    if a.category != b.category:
        return a.category - b.category
    if a.primary != b.primary:
        return a.primary - b.primary
    for left, right in zip(a.kickers, b.kickers):
        if left != right:
            return left - right
    return 0


def best_omaha_hand(hole: Sequence[Card], board: Sequence[Card]) -> Optional[HandEvaluation]:
    """Best hand using exactly two hole cards and exactly three board cards.

    Returns ``None`` while there are fewer than two hole cards or three
    board cards to build a hand from.
    """
    if len(hole) < 2 or len(board) < 3:
        return None
    best: Optional[HandEvaluation] = None
    board_triples = combinations(board, 3)
    for pair in combinations(hole, 2):
        for triple in board_triples:
            hand = evaluate_five(pair + triple)
            if best is None or compare_hands(hand, best) > 0:
                best = hand
    return best


def evaluate_board(players: Sequence[Sequence[Card]], board: Sequence[Card]) -> BoardResult:
    """Winner and split set for one board; ``board`` needs at least 3 cards."""
    hands = [best_omaha_hand(hole, board) for hole in players]
    if any(hand is None for hand in hands):
        raise ValueError("Every player needs two hole cards and the board three cards")
    best_idx = 0
    tied = [0]
    for idx in range(1, len(hands)):
        diff = compare_hands(hands[idx], hands[best_idx])
        if diff > 0:
            best_idx = idx
            tied = [idx]
        elif diff == 0:
            tied.append(idx)
    return BoardResult(winner=best_idx, tied=tuple(tied))
