from __future__ import annotations

from typing import List, Sequence

from .cards import SUITS, Card, remaining_cards
from .combinatorics import combinations
from .evaluator import HandCategory, best_omaha_hand, straight_high

HAND_LABELS = {
    "top_pair": "Top Pair",
    "middle_pair": "Middle Pair",
    "bottom_pair": "Bottom Pair",
    "overpair": "Overpair",
    "trips": "Trips",
    "top_set": "Top Set",
    "middle_set": "Middle Set",
    "bottom_set": "Bottom Set",
    "two_pair": "Two Pair",
    "straight": "Straight",
    "flush": "Flush",
    "nut_flush": "Nut Flush",
    "full_house": "Full House",
    "quads": "Quads",
    "gutshot": "Gutshot",
    "oesd": "OESD",
    "wrap": "Wrap",
    "flush_draw": "FD",
    "nut_flush_draw": "NFD",
}

# Straight outs needed for each draw label, strongest first.
STRAIGHT_DRAW_OUTS = (("wrap", 9), ("oesd", 6), ("gutshot", 3))


def analyze_hand(hole: Sequence[Card], board: Sequence[Card]) -> str:
    """Short label for what a hand holds on this board, e.g. "Top Set+NFD".

    Draws are only reported before the river and only when they would
    improve the current made hand.
    """
    return "+".join(HAND_LABELS[key] for key in hand_features(hole, board))


def hand_features(hole: Sequence[Card], board: Sequence[Card]) -> List[str]:
    best = best_omaha_hand(hole, board)
    if best is None:
        return []
    features: List[str] = []
    made = _made_hand(hole, board, best.category, best.primary)
    if made:
        features.append(made)
    if len(board) <= 4:
        if best.category < HandCategory.FLUSH:
            flush_draw = _flush_draw(hole, board)
            if flush_draw:
                features.append(flush_draw)
        if best.category < HandCategory.STRAIGHT:
            outs = straight_outs(hole, board)
            for key, needed in STRAIGHT_DRAW_OUTS:
                if outs >= needed:
                    features.append(key)
                    break
    return features


def _made_hand(hole: Sequence[Card], board: Sequence[Card], category: HandCategory, primary: int) -> str:
    board_values = sorted((card.value for card in board), reverse=True)
    if category >= HandCategory.FOUR_OF_A_KIND:
        return "quads"
    if category == HandCategory.FULL_HOUSE:
        return "full_house"
    if category == HandCategory.FLUSH:
        return "nut_flush" if _holds_nut_flush(hole, board) else "flush"
    if category == HandCategory.STRAIGHT:
        return "straight"
    if category == HandCategory.THREE_OF_A_KIND:
        if sum(1 for card in hole if card.value == primary) < 2:
            return "trips"
        if primary == board_values[0]:
            return "top_set"
        if primary == board_values[1]:
            return "middle_set"
        return "bottom_set"
    if category == HandCategory.TWO_PAIR:
        return "two_pair"
    if category == HandCategory.PAIR:
        if primary > board_values[0]:
            return "overpair"
        if primary == board_values[0]:
            return "top_pair"
        if primary == board_values[1]:
            return "middle_pair"
        if primary in board_values:
            return "bottom_pair"
    return ""


def _holds_nut_flush(hole: Sequence[Card], board: Sequence[Card]) -> bool:
    for suit in SUITS:
        suited_hole = [card for card in hole if card.suit == suit]
        suited_board = sum(1 for card in board if card.suit == suit)
        if len(suited_hole) >= 2 and suited_board >= 3 and any(card.rank == "A" for card in suited_hole):
            return True
    return False


def _flush_draw(hole: Sequence[Card], board: Sequence[Card]) -> str:
    for suit in SUITS:
        suited_hole = [card for card in hole if card.suit == suit]
        suited_board = sum(1 for card in board if card.suit == suit)
        if len(suited_hole) >= 2 and suited_board == 2:
            return "nut_flush_draw" if any(card.rank == "A" for card in suited_hole) else "flush_draw"
    return ""


def makes_straight(hole: Sequence[Card], board: Sequence[Card]) -> bool:
    """Any two hole cards plus three board cards forming a straight."""
    board_triples = combinations(board, 3)
    for pair in combinations(hole, 2):
        for triple in board_triples:
            if straight_high([card.value for card in pair + triple]):
                return True
    return False


def straight_outs(hole: Sequence[Card], board: Sequence[Card]) -> int:
    """Unseen cards that would give ``hole`` a straight on the next street."""
    board = list(board)
    return sum(1 for card in remaining_cards([hole], board) if makes_straight(hole, board + [card]))
