from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple

from .cards import Card

SAMPLE_PRESETS = (10_000, 30_000, 100_000)
DEFAULT_SAMPLE_COUNT = 30_000
MIN_SAMPLE_COUNT = 100
MIN_PLAYERS = 2
MAX_PLAYERS = 6
MAX_HOLE_CARDS = 6
BOARD_SIZE = 5


class GameType(IntEnum):
    PLO4 = 4
    PLO5 = 5
    PLO6 = 6


class Method(str, Enum):
    EXACT = "exact"
    MONTE_CARLO = "montecarlo"


@dataclass
class CalcConfig:
    game_type: GameType = GameType.PLO4
    players: int = 2
    sample_count: int = DEFAULT_SAMPLE_COUNT
    # Enumerate exactly whenever C(unseen, need) fits under this ceiling.
    # None keeps the fixed "two cards or fewer to come" rule.
    exact_limit: Optional[int] = None


@dataclass(frozen=True)
class EquityResult:
    win: float
    tie: float
    equity: float
    total: int
    method: Method

    def as_dict(self, digits: int = 2) -> Dict[str, object]:
        return {
            "win": round(self.win, digits),
            "tie": round(self.tie, digits),
            "equity": round(self.equity, digits),
            "total": self.total,
            "method": self.method.value,
        }


@dataclass(frozen=True)
class NextCardResult:
    card: Card
    equities: Tuple[float, ...]


@dataclass(frozen=True)
class NextCardSummary:
    best: float
    worst: float
    average: float
    favorable: int
