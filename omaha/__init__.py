"""Pot-Limit Omaha equity engine: hand ranking, showdowns and equity runs."""

from .analysis import analyze_hand
from .cards import Card, RANKS, SUITS, build_deck, parse_card_text, parse_cards, remaining_cards, shuffle, used_cards
from .combinatorics import combinations
from .equity import CalculationCancelled, can_calculate, run_calc, validate_deal
from .evaluator import BoardResult, HandCategory, HandEvaluation, best_omaha_hand, compare_hands, evaluate_board, evaluate_five
from .models import CalcConfig, EquityResult, GameType, Method, NextCardResult, NextCardSummary
from .next_card import calc_next_card_equities, rank_next_cards, summarize_next_cards
from .service import EquityService

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "build_deck",
    "parse_card_text",
    "parse_cards",
    "remaining_cards",
    "shuffle",
    "used_cards",
    "combinations",
    "HandCategory",
    "HandEvaluation",
    "BoardResult",
    "evaluate_five",
    "compare_hands",
    "best_omaha_hand",
    "evaluate_board",
    "CalculationCancelled",
    "can_calculate",
    "validate_deal",
    "run_calc",
    "calc_next_card_equities",
    "rank_next_cards",
    "summarize_next_cards",
    "analyze_hand",
    "CalcConfig",
    "EquityResult",
    "GameType",
    "Method",
    "NextCardResult",
    "NextCardSummary",
    "EquityService",
]
