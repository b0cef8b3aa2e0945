from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set

RANKS = "AKQJT98765432"
SUITS = "shdc"
RANK_VALUE = {rank: 14 - idx for idx, rank in enumerate(RANKS)}
VALUE_RANK = {value: rank for rank, value in RANK_VALUE.items()}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    @property
    def value(self) -> int:
        return RANK_VALUE[self.rank]

    @property
    def code(self) -> int:
        # 0 (2s) .. 51 (Ac)
        return (self.value - 2) * 4 + SUITS.index(self.suit)

    def __str__(self) -> str:
        return self.label


def build_deck() -> List[Card]:
    """All 52 cards, ranks high to low and suits in SUITS order."""
    return [Card(rank, suit) for rank in RANKS for suit in SUITS]


FULL_DECK: tuple[Card, ...] = tuple(build_deck())


def shuffle(cards: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Return a shuffled copy; pass a seeded ``random.Random`` for repeatable order."""
    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return shuffled


def parse_card_text(text: str) -> List[Card]:
    """Scan free text such as "AhKd qc 10s" for cards.

    Rank characters are case-insensitive and "10" reads as "T". Pairs of
    characters that do not form a card are skipped one character at a time,
    so stray separators and a dangling trailing character are dropped.
    """
    upper = text.strip().upper().replace("10", "T")
    cards: List[Card] = []
    idx = 0
    while idx < len(upper):
        if idx + 1 < len(upper):
            rank, suit = upper[idx], upper[idx + 1].lower()
            if rank in RANKS and suit in SUITS:
                cards.append(Card(rank, suit))
                idx += 2
                continue
        idx += 1
    return cards


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    return Card(label[0].upper(), label[1].lower())


def parse_cards(labels: Iterable[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def used_cards(players: Sequence[Sequence[Card]], board: Sequence[Card]) -> Set[Card]:
    used: Set[Card] = set(board)
    for hole in players:
        used.update(hole)
    return used


def remaining_cards(players: Sequence[Sequence[Card]], board: Sequence[Card]) -> List[Card]:
    """Unseen cards in deck order."""
    used = used_cards(players, board)
    return [card for card in FULL_DECK if card not in used]
