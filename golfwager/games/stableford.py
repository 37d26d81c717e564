"""Stableford points scoring."""

from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .ranking import rank_scores
from .schemas import (
    GAME_MODE_NAMES,
    CoreRoundData,
    GameMode,
    GameResultBase,
    LeaderboardEntry,
)

# Points keyed by score relative to par, -3 (albatross or better) to +1.
STANDARD_POINTS = {-3: 5, -2: 4, -1: 3, 0: 2, 1: 1}
STANDARD_WORSE = 0
MODIFIED_POINTS = {-3: 8, -2: 5, -1: 2, 0: 0, 1: -1}
MODIFIED_WORSE = -3


class StablefordConfig(BaseModel):
    mode: Literal["stableford"] = "stableford"
    use_net: bool = Field(
        default=False, validation_alias=AliasChoices("use_net", "useNet")
    )
    modified: bool = False

    model_config = ConfigDict(populate_by_name=True)


class StablefordResult(GameResultBase):
    mode: Literal["stableford"] = "stableford"
    name: str = GAME_MODE_NAMES[GameMode.STABLEFORD]
    hole_points: Dict[str, Dict[int, int]] = Field(serialization_alias="holePoints")
    totals: Dict[str, int]
    leaderboard: List[LeaderboardEntry]


def stableford_points(score: int, par: int, modified: bool = False) -> int:
    table = MODIFIED_POINTS if modified else STANDARD_POINTS
    relative = max(score - par, -3)
    if relative >= 2:
        return MODIFIED_WORSE if modified else STANDARD_WORSE
    return table[relative]


def compute_stableford(
    data: CoreRoundData, config: StablefordConfig
) -> StablefordResult:
    hole_points: Dict[str, Dict[int, int]] = {}
    totals: Dict[str, int] = {}

    for player_id in data.players:
        points: Dict[int, int] = {}
        for hole in data.hole_numbers():
            if data.gross(player_id, hole) <= 0:
                continue
            points[hole] = stableford_points(
                data.score(player_id, hole, config.use_net),
                data.course.par(hole),
                config.modified,
            )
        hole_points[player_id] = points
        totals[player_id] = sum(points.values())

    leaderboard = [
        LeaderboardEntry(player_id=player_id, position=position, score=score)
        for player_id, position, score in rank_scores(totals, descending=True)
    ]
    return StablefordResult(
        hole_points=hole_points, totals=totals, leaderboard=leaderboard
    )


__all__ = [
    "StablefordConfig",
    "StablefordResult",
    "compute_stableford",
    "stableford_points",
]
