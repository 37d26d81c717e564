"""Dots: achievement points per hole and the pairwise dots wager."""

from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfwager.config import DOTS_WAGER_PER_DOT

from .ranking import rank_scores
from .schemas import (
    GAME_MODE_NAMES,
    CoreRoundData,
    GameMode,
    GameResultBase,
    LeaderboardEntry,
    Payable,
)


class DotsConfig(BaseModel):
    mode: Literal["dots"] = "dots"
    wager_per_dot: int = Field(
        default=DOTS_WAGER_PER_DOT,
        ge=0,
        validation_alias=AliasChoices("wager_per_dot", "wagerPerDot"),
    )
    fairway_dots: int = Field(
        default=1, validation_alias=AliasChoices("fairway_dots", "fairwayDots")
    )
    gir_dots: int = Field(default=1, validation_alias=AliasChoices("gir_dots", "girDots"))
    one_putt_dots: int = Field(
        default=1, validation_alias=AliasChoices("one_putt_dots", "onePuttDots")
    )
    birdie_dots: int = Field(
        default=2, validation_alias=AliasChoices("birdie_dots", "birdieDots")
    )
    eagle_dots: int = Field(
        default=5, validation_alias=AliasChoices("eagle_dots", "eagleDots")
    )
    double_bogey_penalty: int = Field(
        default=1,
        ge=0,
        validation_alias=AliasChoices("double_bogey_penalty", "doubleBogeyPenalty"),
    )

    model_config = ConfigDict(populate_by_name=True)


class DotsBreakdown(BaseModel):
    fairway: int = 0
    gir: int = 0
    one_putt: int = Field(default=0, serialization_alias="onePutt")
    birdie: int = 0
    eagle: int = 0
    penalty: int = 0
    total: int = 0


class DotsHoleResult(BaseModel):
    hole: int
    player_dots: Dict[str, int] = Field(serialization_alias="playerDots")
    breakdown: Dict[str, DotsBreakdown]


class DotsTotals(BaseModel):
    total_dots: int = Field(default=0, serialization_alias="totalDots")
    fairway_dots: int = Field(default=0, serialization_alias="fairwayDots")
    gir_dots: int = Field(default=0, serialization_alias="girDots")
    one_putt_dots: int = Field(default=0, serialization_alias="onePuttDots")
    birdie_dots: int = Field(default=0, serialization_alias="birdieDots")
    eagle_dots: int = Field(default=0, serialization_alias="eagleDots")
    penalty_dots: int = Field(default=0, serialization_alias="penaltyDots")


class DotsResult(GameResultBase):
    mode: Literal["dots"] = "dots"
    name: str = GAME_MODE_NAMES[GameMode.DOTS]
    hole_by_hole: List[DotsHoleResult] = Field(serialization_alias="holeByHole")
    totals: Dict[str, DotsTotals]
    leaderboard: List[LeaderboardEntry]


def score_hole(
    data: CoreRoundData, player_id: str, hole: int, config: DotsConfig
) -> DotsBreakdown:
    """Dots earned by a player on one hole. Penalties are negative."""

    breakdown = DotsBreakdown()
    detail = data.detail(player_id, hole)
    if detail is not None:
        if detail.fairway_hit:
            breakdown.fairway = config.fairway_dots
        if detail.green_in_regulation:
            breakdown.gir = config.gir_dots
        if detail.putts == 1:
            breakdown.one_putt = config.one_putt_dots

    strokes = data.gross(player_id, hole)
    if strokes > 0:
        par = data.course.par(hole)
        if strokes == par - 1:
            breakdown.birdie = config.birdie_dots
        elif strokes <= par - 2:
            breakdown.eagle = config.eagle_dots
        elif strokes >= par + 2:
            breakdown.penalty = -config.double_bogey_penalty

    breakdown.total = (
        breakdown.fairway
        + breakdown.gir
        + breakdown.one_putt
        + breakdown.birdie
        + breakdown.eagle
        + breakdown.penalty
    )
    return breakdown


def _holes_with_data(data: CoreRoundData) -> List[int]:
    holes: set[int] = set()
    for player_id in data.players:
        holes.update(data.strokes.get(player_id, {}))
        holes.update(data.hole_details.get(player_id, {}))
    return sorted(holes)


def dots_payments(
    players: List[str], totals: Dict[str, DotsTotals], wager_per_dot: int
) -> List[Payable]:
    """One payable per pair with a dots difference, loser to winner."""

    ledger: List[Payable] = []
    if wager_per_dot <= 0:
        return ledger
    for index, first in enumerate(players):
        for second in players[index + 1 :]:
            diff = totals[first].total_dots - totals[second].total_dots
            if diff == 0:
                continue
            winner, loser = (first, second) if diff > 0 else (second, first)
            ledger.append(
                Payable(
                    from_player=loser,
                    to_player=winner,
                    amount=abs(diff) * wager_per_dot,
                    memo=f"Dots difference: {abs(diff)}",
                )
            )
    return ledger


def compute_dots(data: CoreRoundData, config: DotsConfig) -> DotsResult:
    totals = {player_id: DotsTotals() for player_id in data.players}
    hole_results: List[DotsHoleResult] = []

    for hole in _holes_with_data(data):
        player_dots: Dict[str, int] = {}
        breakdowns: Dict[str, DotsBreakdown] = {}
        for player_id in data.players:
            if not data.has_stroke(player_id, hole) and data.detail(player_id, hole) is None:
                breakdown = DotsBreakdown()
            else:
                breakdown = score_hole(data, player_id, hole, config)
            player_dots[player_id] = breakdown.total
            breakdowns[player_id] = breakdown

            total = totals[player_id]
            total.total_dots += breakdown.total
            total.fairway_dots += breakdown.fairway
            total.gir_dots += breakdown.gir
            total.one_putt_dots += breakdown.one_putt
            total.birdie_dots += breakdown.birdie
            total.eagle_dots += breakdown.eagle
            total.penalty_dots += breakdown.penalty

        hole_results.append(
            DotsHoleResult(hole=hole, player_dots=player_dots, breakdown=breakdowns)
        )

    leaderboard = [
        LeaderboardEntry(player_id=player_id, position=position, score=score)
        for player_id, position, score in rank_scores(
            {player_id: totals[player_id].total_dots for player_id in data.players},
            descending=True,
        )
    ]

    return DotsResult(
        ledger=dots_payments(data.players, totals, config.wager_per_dot),
        hole_by_hole=hole_results,
        totals=totals,
        leaderboard=leaderboard,
    )


__all__ = [
    "DotsConfig",
    "DotsHoleResult",
    "DotsResult",
    "DotsTotals",
    "compute_dots",
    "dots_payments",
    "score_hole",
]
