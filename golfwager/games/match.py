"""Two-player match play."""

from __future__ import annotations

from typing import Dict, List, Literal, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .schemas import (
    GAME_MODE_NAMES,
    CoreRoundData,
    GameMode,
    GameResultBase,
    GameValidationError,
)


class MatchConfig(BaseModel):
    mode: Literal["match-play"] = "match-play"
    use_net: bool = Field(
        default=False, validation_alias=AliasChoices("use_net", "useNet")
    )

    model_config = ConfigDict(populate_by_name=True)


class MatchHoleResult(BaseModel):
    hole: int
    winner: Optional[str] = None
    margin: int = 0
    scores: Dict[str, int]
    net_scores: Dict[str, int] = Field(serialization_alias="netScores")


class MatchStatus(BaseModel):
    leader: Optional[str] = None
    margin: int = 0
    holes_remaining: int = Field(serialization_alias="holesRemaining")
    is_complete: bool = Field(serialization_alias="isComplete")
    winner: Optional[str] = None


class MatchPlayerTotals(BaseModel):
    holes_won: int = Field(serialization_alias="holesWon")
    holes_lost: int = Field(serialization_alias="holesLost")
    holes_tied: int = Field(serialization_alias="holesTied")
    current_status: Literal["up", "down", "tied"] = Field(
        serialization_alias="currentStatus"
    )
    margin: int


class MatchResult(GameResultBase):
    mode: Literal["match-play"] = "match-play"
    name: str = GAME_MODE_NAMES[GameMode.MATCH_PLAY]
    hole_by_hole: List[MatchHoleResult] = Field(serialization_alias="holeByHole")
    totals: Dict[str, MatchPlayerTotals]
    final_status: MatchStatus = Field(serialization_alias="finalStatus")
    match_summary: str = Field(serialization_alias="matchSummary")


def _status_label(margin: int) -> Literal["up", "down", "tied"]:
    if margin > 0:
        return "up"
    if margin < 0:
        return "down"
    return "tied"


def match_status(
    hole_results: List[MatchHoleResult],
    current_hole: int,
    player_a: str,
    player_b: str,
    total_holes: Optional[int] = None,
) -> MatchStatus:
    """Match status after ``current_hole`` holes have been played.

    The match is complete once the margin exceeds the holes remaining or the
    last hole has been played.
    """

    total = total_holes if total_holes is not None else len(hole_results)
    played = hole_results[:current_hole]
    wins_a = sum(1 for result in played if result.winner == player_a)
    wins_b = sum(1 for result in played if result.winner == player_b)

    margin = abs(wins_a - wins_b)
    holes_remaining = max(0, total - current_hole)
    leader: Optional[str] = None
    if wins_a > wins_b:
        leader = player_a
    elif wins_b > wins_a:
        leader = player_b

    is_complete = margin > holes_remaining or current_hole >= total
    return MatchStatus(
        leader=leader,
        margin=margin,
        holes_remaining=holes_remaining,
        is_complete=is_complete,
        winner=leader if is_complete else None,
    )


def _decisive_status(
    hole_results: List[MatchHoleResult], player_a: str, player_b: str
) -> MatchStatus:
    total = len(hole_results)
    for played in range(1, total + 1):
        status = match_status(hole_results, played, player_a, player_b, total)
        if status.is_complete:
            return status
    return match_status(hole_results, total, player_a, player_b, total)


def format_match_status(
    status: MatchStatus, names: Optional[Mapping[str, str]] = None
) -> str:
    names = names or {}
    if status.winner:
        winner = names.get(status.winner, status.winner)
        if status.holes_remaining == 0:
            return f"{winner} wins {status.margin} up"
        return f"{winner} wins {status.margin} & {status.holes_remaining}"
    if status.leader:
        leader = names.get(status.leader, status.leader)
        if status.is_complete:
            return f"{leader} wins {status.margin} up"
        return f"{leader} {status.margin} up"
    return "Match tied" if status.is_complete else "All square"


def compute_match(data: CoreRoundData, config: MatchConfig) -> MatchResult:
    if len(data.players) != 2:
        raise GameValidationError("Match play requires exactly 2 players")

    player_a, player_b = data.players
    hole_results: List[MatchHoleResult] = []
    won = {player_a: 0, player_b: 0}
    tied = 0

    for hole in data.hole_numbers():
        score_a = data.score(player_a, hole, config.use_net)
        score_b = data.score(player_b, hole, config.use_net)
        winner: Optional[str] = None
        if score_a < score_b:
            winner = player_a
        elif score_b < score_a:
            winner = player_b

        if winner is None:
            tied += 1
        else:
            won[winner] += 1

        hole_results.append(
            MatchHoleResult(
                hole=hole,
                winner=winner,
                margin=abs(score_a - score_b),
                scores={
                    player_a: data.gross(player_a, hole),
                    player_b: data.gross(player_b, hole),
                },
                net_scores={player_a: score_a, player_b: score_b},
            )
        )

    totals: Dict[str, MatchPlayerTotals] = {}
    for player, opponent in ((player_a, player_b), (player_b, player_a)):
        margin = won[player] - won[opponent]
        totals[player] = MatchPlayerTotals(
            holes_won=won[player],
            holes_lost=won[opponent],
            holes_tied=tied,
            current_status=_status_label(margin),
            margin=margin,
        )

    final_status = _decisive_status(hole_results, player_a, player_b)
    if final_status.winner:
        summary = format_match_status(final_status)
    else:
        summary = "Match tied"

    return MatchResult(
        hole_by_hole=hole_results,
        totals=totals,
        final_status=final_status,
        match_summary=summary,
    )


__all__ = [
    "MatchConfig",
    "MatchHoleResult",
    "MatchResult",
    "MatchStatus",
    "compute_match",
    "format_match_status",
    "match_status",
]
