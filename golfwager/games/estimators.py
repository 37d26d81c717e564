"""Hole-detail estimators for rounds recorded with strokes only.

Estimated details are never part of scoring itself: callers opt in by
building an enriched snapshot with :func:`with_estimated_details` before
running dots or snake.
"""

from __future__ import annotations

import random
from typing import Dict, Optional, Protocol

from .schemas import CoreRoundData, HoleDetail


class HoleDetailEstimator(Protocol):
    def estimate(self, strokes: int, par: int) -> HoleDetail: ...


class RandomHoleEstimator:
    """Seedable estimator of putts, fairways and greens from score to par."""

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        rng: Optional[random.Random] = None,
        fairway_hit_rate: float = 0.6,
        gir_rate: float = 0.4,
        one_putt_rate: float = 0.05,
        three_putt_rate: float = 0.15,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self.fairway_hit_rate = fairway_hit_rate
        self.gir_rate = gir_rate
        self.one_putt_rate = one_putt_rate
        self.three_putt_rate = three_putt_rate

    def _putts(self, to_par: int) -> int:
        roll = self._rng.random()
        if to_par <= -2:
            return 1 if roll < 0.8 else 2
        if to_par == -1:
            return 1 if roll < 0.6 else 2
        if to_par == 0:
            if roll < self.one_putt_rate:
                return 1
            if roll < 1 - self.three_putt_rate:
                return 2
            return 3
        if to_par == 1:
            if roll < 0.02:
                return 1
            return 2 if roll < 0.7 else 3
        if roll < 0.01:
            return 1
        if roll < 0.5:
            return 2
        return 3 if roll < 0.9 else 4

    def estimate(self, strokes: int, par: int) -> HoleDetail:
        return HoleDetail(
            putts=self._putts(strokes - par),
            fairway_hit=self._rng.random() < self.fairway_hit_rate,
            green_in_regulation=self._rng.random() < self.gir_rate,
        )


class ScoreBasedPuttEstimator:
    """Deterministic putts from score to par: two at par, one more per stroke over."""

    def estimate(self, strokes: int, par: int) -> HoleDetail:
        return HoleDetail(putts=max(1, min(4, strokes - par + 2)))


def with_estimated_details(
    data: CoreRoundData, estimator: HoleDetailEstimator
) -> CoreRoundData:
    """Return a copy of ``data`` with details filled for played holes lacking them."""

    details: Dict[str, Dict[int, HoleDetail]] = {
        player_id: dict(player_details)
        for player_id, player_details in data.hole_details.items()
    }
    for player_id in data.players:
        player_details = details.setdefault(player_id, {})
        for hole in sorted(data.strokes.get(player_id, {})):
            strokes = data.gross(player_id, hole)
            if strokes <= 0 or hole in player_details:
                continue
            player_details[hole] = estimator.estimate(strokes, data.course.par(hole))
    return data.model_copy(update={"hole_details": details})


__all__ = [
    "HoleDetailEstimator",
    "RandomHoleEstimator",
    "ScoreBasedPuttEstimator",
    "with_estimated_details",
]
