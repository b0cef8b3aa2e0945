import argparse
import logging
import random
import sys
from typing import List, Optional

from .analysis import analyze_hand
from .cards import parse_card_text
from .equity import can_calculate, run_calc
from .models import DEFAULT_SAMPLE_COUNT, SAMPLE_PRESETS, GameType
from .next_card import calc_next_card_equities, rank_next_cards, summarize_next_cards


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pot-Limit Omaha equity calculator")
    parser.add_argument("--player", action="append", default=[], help="Hole cards, e.g. 'AsAhKsKh' (repeat per player)")
    parser.add_argument("--board", default="", help="Community cards, e.g. 'Ah 7d 2c'")
    parser.add_argument("--game", type=int, choices=[gt.value for gt in GameType], default=GameType.PLO4.value)
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLE_COUNT, help=f"Monte Carlo samples (presets: {SAMPLE_PRESETS})")
    parser.add_argument("--exact-limit", type=int, default=None, help="Enumerate exactly up to this many boards")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--next-card", action="store_true", help="Show equity by next card on flop or turn")
    parser.add_argument("--top", type=int, default=5, help="Cards listed per player with --next-card")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def log_level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=log_level(args.log_level))

    players = [parse_card_text(text) for text in args.player]
    board = parse_card_text(args.board)
    if not can_calculate(players, board, GameType(args.game)):
        parser.error(f"Need 2-6 players with {args.game} distinct cards each and at most 5 board cards")

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        results = run_calc(players, board, args.samples, rng=rng, exact_limit=args.exact_limit)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Board: {' '.join(card.label for card in board) or '-'}")
    for seat, (hole, result) in enumerate(zip(players, results)):
        label = analyze_hand(hole, board)
        print(
            f"P{seat + 1} {''.join(card.label for card in hole):<12} "
            f"win {result.win:6.2f}%  tie {result.tie:6.2f}%  equity {result.equity:6.2f}%"
            + (f"  [{label}]" if label else "")
        )
    print(f"{results[0].total} boards, {results[0].method.value}")

    if args.next_card:
        next_cards = calc_next_card_equities(players, board)
        if not next_cards:
            print("Next-card view needs a flop or turn board", file=sys.stderr)
            return
        for seat in range(len(players)):
            summary = summarize_next_cards(next_cards, seat)
            best = rank_next_cards(next_cards, seat)[: args.top]
            print(
                f"P{seat + 1} best {summary.best:.1f}% worst {summary.worst:.1f}% "
                f"avg {summary.average:.1f}% favorable {summary.favorable}: "
                + " ".join(f"{item.card.label}={item.equities[seat]:.1f}" for item in best)
            )


if __name__ == "__main__":
    main()
