from __future__ import annotations

import asyncio
import logging
import random
from typing import List, Optional, Sequence

from .cards import Card
from .equity import CalculationCancelled, Hands, run_calc
from .models import CalcConfig, EquityResult, NextCardResult
from .next_card import calc_next_card_equities

LOGGER = logging.getLogger("omaha_service")

# EquityService keeps slow calculations off the event loop. Every new request
# supersedes the previous one; stale runs stop at their next checkpoint and
# resolve to None instead of a result for inputs that no longer apply.


class EquityService:
    def __init__(self, config: Optional[CalcConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or CalcConfig()
        self.rng = rng
        self.generation = 0
        self.next_card_generation = 0

    def _is_stale(self, generation: int) -> bool:
        return generation != self.generation

    def _next_card_is_stale(self, generation: int) -> bool:
        return generation != self.next_card_generation

    def invalidate(self) -> None:
        """Mark every in-flight calculation stale, e.g. after inputs change."""
        self.generation += 1
        self.next_card_generation += 1

    async def calculate(self, players: Hands, board: Sequence[Card]) -> Optional[List[EquityResult]]:
        self.generation += 1
        generation = self.generation
        hands = [list(hole) for hole in players]
        cards = list(board)
        try:
            results = await asyncio.to_thread(
                run_calc,
                hands,
                cards,
                self.config.sample_count,
                rng=self.rng,
                exact_limit=self.config.exact_limit,
                cancelled=lambda: self._is_stale(generation),
            )
        except CalculationCancelled:
            LOGGER.info("Equity run %s cancelled", generation)
            return None
        if self._is_stale(generation):
            LOGGER.info("Discarding stale equity run %s", generation)
            return None
        return results

    async def next_cards(self, players: Hands, board: Sequence[Card]) -> Optional[List[NextCardResult]]:
        self.next_card_generation += 1
        generation = self.next_card_generation
        hands = [list(hole) for hole in players]
        cards = list(board)
        try:
            results = await asyncio.to_thread(
                calc_next_card_equities,
                hands,
                cards,
                cancelled=lambda: self._next_card_is_stale(generation),
            )
        except CalculationCancelled:
            LOGGER.info("Next-card run %s cancelled", generation)
            return None
        if self._next_card_is_stale(generation):
            LOGGER.info("Discarding stale next-card run %s", generation)
            return None
        return results
