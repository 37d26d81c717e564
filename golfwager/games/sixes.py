"""Sixes: rotating best-ball partnerships over three six-hole segments."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .schemas import (
    GAME_MODE_NAMES,
    CoreRoundData,
    GameMode,
    GameResultBase,
    GameValidationError,
)

SEGMENTS: List[List[int]] = [
    list(range(1, 7)),
    list(range(7, 13)),
    list(range(13, 19)),
]

# Seat indexes per segment; every pair partners at least once.
ROTATIONS: Dict[int, List[List[List[int]]]] = {
    3: [
        [[0, 1], [2]],
        [[0, 2], [1]],
        [[1, 2], [0]],
    ],
    4: [
        [[0, 1], [2, 3]],
        [[0, 2], [1, 3]],
        [[0, 3], [1, 2]],
    ],
}


class SixesConfig(BaseModel):
    mode: Literal["sixes"] = "sixes"
    use_net: bool = Field(
        default=False, validation_alias=AliasChoices("use_net", "useNet")
    )

    model_config = ConfigDict(populate_by_name=True)


class SixesTeam(BaseModel):
    players: List[str]
    segment_score: int = Field(default=0, serialization_alias="segmentScore")


class SixesSegment(BaseModel):
    holes: List[int]
    teams: List[SixesTeam]
    winner: Optional[str] = None
    points: Dict[str, int]


class SixesResult(GameResultBase):
    mode: Literal["sixes"] = "sixes"
    name: str = GAME_MODE_NAMES[GameMode.SIXES]
    segments: List[SixesSegment]
    player_totals: Dict[str, int] = Field(serialization_alias="playerTotals")
    winners: List[str]


def teams_for_segment(players: Sequence[str], segment_index: int) -> List[List[str]]:
    """Two teams for the given segment (0, 1 or 2)."""

    rotation = ROTATIONS.get(len(players))
    if rotation is not None:
        return [[players[seat] for seat in team] for team in rotation[segment_index]]

    offset = segment_index % len(players)
    rotated = list(players[offset:]) + list(players[:offset])
    first_size = (len(rotated) + 1) // 2
    return [rotated[:first_size], rotated[first_size:]]


def best_ball_total(
    data: CoreRoundData, team: Sequence[str], holes: Sequence[int], use_net: bool
) -> int:
    total = 0
    for hole in holes:
        scores = [
            data.score(player_id, hole, use_net)
            for player_id in team
            if data.gross(player_id, hole) > 0
        ]
        if scores:
            total += min(scores)
    return total


def compute_sixes(data: CoreRoundData, config: SixesConfig) -> SixesResult:
    if len(data.players) < 3:
        raise GameValidationError("Sixes requires at least 3 players")

    totals = {player_id: 0 for player_id in data.players}
    segments: List[SixesSegment] = []

    for index, holes in enumerate(SEGMENTS):
        teams = [
            SixesTeam(
                players=members,
                segment_score=best_ball_total(data, members, holes, config.use_net),
            )
            for members in teams_for_segment(data.players, index)
        ]
        first, second = teams
        points = {player_id: 0 for player_id in data.players}
        winner: Optional[SixesTeam] = None
        if first.segment_score < second.segment_score:
            winner = first
        elif second.segment_score < first.segment_score:
            winner = second

        if winner is not None:
            for player_id in winner.players:
                points[player_id] = 1
                totals[player_id] += 1

        segments.append(
            SixesSegment(
                holes=holes,
                teams=teams,
                winner=" & ".join(winner.players) if winner else None,
                points=points,
            )
        )

    best = max(totals.values())
    winners = [player_id for player_id in data.players if totals[player_id] == best]
    return SixesResult(segments=segments, player_totals=totals, winners=winners)


__all__ = [
    "SixesConfig",
    "SixesResult",
    "compute_sixes",
    "teams_for_segment",
]
