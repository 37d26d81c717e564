"""Stroke play scoring: gross/net totals, max-score clamping and leaderboard."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .ranking import rank_scores
from .schemas import (
    GAME_MODE_NAMES,
    CoreRoundData,
    Course,
    GameMode,
    GameResultBase,
    LeaderboardEntry,
)

DEFAULT_PAR_PLUS = 2
DEFAULT_FIXED_MAX = 10


class MaxScoreRule(BaseModel):
    type: Literal["double-bogey", "triple-bogey", "par-plus", "fixed"]
    value: Optional[int] = None


class StrokeConfig(BaseModel):
    mode: Literal["stroke-play"] = "stroke-play"
    use_net: bool = Field(
        default=False, validation_alias=AliasChoices("use_net", "useNet")
    )
    max_score_rule: Optional[MaxScoreRule] = Field(
        default=None, validation_alias=AliasChoices("max_score_rule", "maxScoreRule")
    )

    model_config = ConfigDict(populate_by_name=True)


class PlayerTotals(BaseModel):
    gross: int
    net: int


class HoleBreakdown(BaseModel):
    gross: int
    net: int


class StrokeLeaderboardEntry(LeaderboardEntry):
    score_type: Literal["gross", "net"] = Field(serialization_alias="scoreType")
    total_strokes: int = Field(serialization_alias="totalStrokes")
    net_strokes: int = Field(serialization_alias="netStrokes")


class StrokeResult(GameResultBase):
    mode: Literal["stroke-play"] = "stroke-play"
    name: str = GAME_MODE_NAMES[GameMode.STROKE_PLAY]
    totals: Dict[str, PlayerTotals]
    leaderboard: List[StrokeLeaderboardEntry]
    hole_by_hole: Dict[str, Dict[int, HoleBreakdown]] = Field(
        serialization_alias="holeByHole"
    )


class RoundStats(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    gross_total: int = Field(serialization_alias="grossTotal")
    net_total: int = Field(serialization_alias="netTotal")
    holes_played: int = Field(serialization_alias="holesPlayed")
    birdies_or_better: int = Field(serialization_alias="birdiesOrBetter")
    pars: int
    bogeys: int
    double_bogey_or_worse: int = Field(serialization_alias="doubleBogeyOrWorse")
    average_score: Optional[float] = Field(
        default=None, serialization_alias="averageScore"
    )

    model_config = ConfigDict(populate_by_name=True)


def apply_max_score(score: int, rule: MaxScoreRule, par: int) -> int:
    """Clamp a hole score with the configured maximum-score rule."""

    if rule.type == "double-bogey":
        return min(score, par + 2)
    if rule.type == "triple-bogey":
        return min(score, par + 3)
    if rule.type == "par-plus":
        return min(score, par + (rule.value or DEFAULT_PAR_PLUS))
    return min(score, rule.value or DEFAULT_FIXED_MAX)


def rank_stroke_totals(
    totals: Dict[str, PlayerTotals], use_net: bool
) -> List[StrokeLeaderboardEntry]:
    score_type: Literal["gross", "net"] = "net" if use_net else "gross"
    scores = {
        player_id: (total.net if use_net else total.gross)
        for player_id, total in totals.items()
    }
    return [
        StrokeLeaderboardEntry(
            player_id=player_id,
            position=position,
            score=score,
            score_type=score_type,
            total_strokes=totals[player_id].gross,
            net_strokes=totals[player_id].net,
        )
        for player_id, position, score in rank_scores(scores)
    ]


def compute_stroke(data: CoreRoundData, config: StrokeConfig) -> StrokeResult:
    totals: Dict[str, PlayerTotals] = {}
    hole_by_hole: Dict[str, Dict[int, HoleBreakdown]] = {}
    holes = data.hole_numbers()

    for player_id in data.players:
        gross_total = 0
        net_total = 0
        breakdown: Dict[int, HoleBreakdown] = {}
        for hole in holes:
            gross = data.gross(player_id, hole)
            net = data.score(player_id, hole, config.use_net)
            if config.max_score_rule is not None:
                net = apply_max_score(
                    net, config.max_score_rule, data.course.par(hole)
                )
            gross_total += gross
            net_total += net
            breakdown[hole] = HoleBreakdown(gross=gross, net=net)
        totals[player_id] = PlayerTotals(gross=gross_total, net=net_total)
        hole_by_hole[player_id] = breakdown

    return StrokeResult(
        totals=totals,
        leaderboard=rank_stroke_totals(totals, config.use_net),
        hole_by_hole=hole_by_hole,
    )


def round_stats(result: StrokeResult, player_id: str, course: Course) -> RoundStats:
    """Scoring distribution for a player, relative to par on gross scores."""

    holes = result.hole_by_hole.get(player_id, {})
    played = {hole: entry for hole, entry in holes.items() if entry.gross > 0}
    counts = {"birdie": 0, "par": 0, "bogey": 0, "double": 0}
    for hole, entry in played.items():
        to_par = entry.gross - course.par(hole)
        if to_par <= -1:
            counts["birdie"] += 1
        elif to_par == 0:
            counts["par"] += 1
        elif to_par == 1:
            counts["bogey"] += 1
        else:
            counts["double"] += 1

    gross_total = sum(entry.gross for entry in played.values())
    return RoundStats(
        player_id=player_id,
        gross_total=gross_total,
        net_total=sum(entry.net for entry in played.values()),
        holes_played=len(played),
        birdies_or_better=counts["birdie"],
        pars=counts["par"],
        bogeys=counts["bogey"],
        double_bogey_or_worse=counts["double"],
        average_score=gross_total / len(played) if played else None,
    )


__all__ = [
    "MaxScoreRule",
    "RoundStats",
    "StrokeConfig",
    "StrokeLeaderboardEntry",
    "StrokeResult",
    "apply_max_score",
    "compute_stroke",
    "rank_stroke_totals",
    "round_stats",
]
