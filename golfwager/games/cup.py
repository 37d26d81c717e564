"""Pinseekr Cup: a two-team tournament whose rounds are scored by the game engines.

Each round awards team points through one engine (stroke, match, dots or
snake). The first team to reach ``total_points_to_win`` takes the cup. All
functions are pure: playing a round never mutates the cup, callers record
the result with :func:`record_cup_round`.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Literal, Mapping, Optional, Sequence, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfwager.handicap.pops import build_round_data

from .dispatch import GameResult
from .dots import DotsConfig, compute_dots
from .estimators import ScoreBasedPuttEstimator, with_estimated_details
from .match import MatchConfig, compute_match
from .ranking import round_half_up
from .schemas import CoreRoundData, Course, GameValidationError, HoleDetail
from .snake import SnakeConfig, compute_snake
from .stroke import StrokeConfig, compute_stroke

logger = logging.getLogger(__name__)

CupTeam = Literal["Team A", "Team B"]
CupGameMode = Literal["stroke", "match", "dots", "snake"]
CupFormat = Literal["individual", "pairs", "team"]

TEAM_A: CupTeam = "Team A"
TEAM_B: CupTeam = "Team B"
TEAMS: Tuple[CupTeam, CupTeam] = (TEAM_A, TEAM_B)

DEFAULT_CUP_NAME = "Pinseekr Cup 2025"
DEFAULT_POINTS_TO_WIN = 9.0
MIN_CUP_PLAYERS = 4


class CupPlayer(BaseModel):
    id: str
    name: str = ""
    handicap: float = Field(default=0, ge=0)
    team: Optional[CupTeam] = None


class CupRound(BaseModel):
    id: str
    name: str
    game_mode: CupGameMode = Field(
        validation_alias=AliasChoices("game_mode", "gameMode"),
        serialization_alias="gameMode",
    )
    format: CupFormat = "individual"
    points_available: float = Field(
        gt=0,
        validation_alias=AliasChoices("points_available", "pointsAvailable"),
        serialization_alias="pointsAvailable",
    )
    completed: bool = False

    model_config = ConfigDict(populate_by_name=True)


DEFAULT_CUP_ROUNDS: List[CupRound] = [
    CupRound(
        id="round-1",
        name="Team Stroke Play Championship",
        game_mode="stroke",
        format="team",
        points_available=4,
    ),
    CupRound(
        id="round-2",
        name="Singles Match Play",
        game_mode="match",
        format="individual",
        points_available=6,
    ),
    CupRound(
        id="round-3",
        name="Dots Championship",
        game_mode="dots",
        format="individual",
        points_available=4,
    ),
    CupRound(
        id="round-4",
        name="Snake Challenge",
        game_mode="snake",
        format="team",
        points_available=2,
    ),
]


def _default_rounds() -> List[CupRound]:
    return [cup_round.model_copy() for cup_round in DEFAULT_CUP_ROUNDS]


class CupConfig(BaseModel):
    name: str = DEFAULT_CUP_NAME
    players: List[CupPlayer]
    rounds: List[CupRound] = Field(default_factory=_default_rounds)
    total_points_to_win: float = Field(
        default=DEFAULT_POINTS_TO_WIN,
        gt=0,
        validation_alias=AliasChoices("total_points_to_win", "totalPointsToWin"),
        serialization_alias="totalPointsToWin",
    )

    model_config = ConfigDict(populate_by_name=True)

    def team(self, team: CupTeam) -> List[CupPlayer]:
        return [player for player in self.players if player.team == team]

    def find_round(self, round_id: str) -> Optional[CupRound]:
        return next((r for r in self.rounds if r.id == round_id), None)


class CupRoundResult(BaseModel):
    round_id: str = Field(
        validation_alias=AliasChoices("round_id", "roundId"),
        serialization_alias="roundId",
    )
    game_mode: CupGameMode = Field(
        validation_alias=AliasChoices("game_mode", "gameMode"),
        serialization_alias="gameMode",
    )
    points_awarded: Dict[str, float] = Field(
        validation_alias=AliasChoices("points_awarded", "pointsAwarded"),
        serialization_alias="pointsAwarded",
    )
    results: List[GameResult] = Field(default_factory=list)
    summary: str = ""

    model_config = ConfigDict(populate_by_name=True)


class CupStanding(BaseModel):
    team: CupTeam
    points: float
    rounds_won: int = Field(serialization_alias="roundsWon")


class CupMvp(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    name: str
    points_contributed: float = Field(serialization_alias="pointsContributed")


class CupResults(BaseModel):
    tournament: CupConfig
    completed_rounds: List[CupRoundResult] = Field(
        serialization_alias="completedRounds"
    )
    current_standings: Dict[str, float] = Field(
        serialization_alias="currentStandings"
    )
    leaderboard: List[CupStanding]
    is_complete: bool = Field(serialization_alias="isComplete")
    winner: Optional[CupTeam] = None
    mvp: Optional[CupMvp] = Field(default=None, serialization_alias="mvpPlayer")


Points = Dict[str, float]
RoundOutcome = Tuple[Points, List[GameResult], str]


def _award(winner: Optional[CupTeam], points: float) -> Points:
    if winner is None:
        return {team: points / 2 for team in TEAMS}
    return {team: (points if team == winner else 0.0) for team in TEAMS}


def _lower(team_a: float, team_b: float) -> Optional[CupTeam]:
    if team_a < team_b:
        return TEAM_A
    if team_b < team_a:
        return TEAM_B
    return None


def _leading_team(points: Points) -> str:
    return _lower(-points[TEAM_A], -points[TEAM_B]) or "Teams tied"


def _average(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else float("inf")


def _fmt(points: float) -> str:
    return f"{points:g}"


def _stroke_round(cup: CupConfig, data: CoreRoundData, cup_round: CupRound) -> RoundOutcome:
    result = compute_stroke(data, StrokeConfig(use_net=True))
    averages = [
        _average([result.totals[player.id].net for player in cup.team(team)])
        for team in TEAMS
    ]
    points = _award(_lower(*averages), cup_round.points_available)
    summary = f"Stroke Play: {_leading_team(points)} dominated with superior team scoring"
    return points, [result], summary


def _match_round(cup: CupConfig, data: CoreRoundData, cup_round: CupRound) -> RoundOutcome:
    if cup_round.format != "individual":
        averages = [
            _average(
                [
                    score
                    for player in cup.team(team)
                    for score in data.strokes.get(player.id, {}).values()
                ]
            )
            for team in TEAMS
        ]
        points = _award(_lower(*averages), cup_round.points_available)
        return points, [], f"Match Play: {_leading_team(points)} won the team battle"

    # Singles pair the nth player of each team; one point per match.
    points = {team: 0.0 for team in TEAMS}
    results: List[GameResult] = []
    for player_a, player_b in zip(cup.team(TEAM_A), cup.team(TEAM_B)):
        pairing = data.model_copy(update={"players": [player_a.id, player_b.id]})
        result = compute_match(pairing, MatchConfig(use_net=True))
        results.append(result)
        winner = result.final_status.winner
        if winner == player_a.id:
            points[TEAM_A] += 1
        elif winner == player_b.id:
            points[TEAM_B] += 1
        else:
            points[TEAM_A] += 0.5
            points[TEAM_B] += 0.5

    summary = (
        f"Singles Matches: Team A {_fmt(points[TEAM_A])} - "
        f"{_fmt(points[TEAM_B])} Team B"
    )
    return points, results, summary


def _dots_round(cup: CupConfig, data: CoreRoundData, cup_round: CupRound) -> RoundOutcome:
    result = compute_dots(data, DotsConfig())
    team_dots = [
        sum(result.totals[player.id].total_dots for player in cup.team(team))
        for team in TEAMS
    ]
    points = _award(_lower(-team_dots[0], -team_dots[1]), cup_round.points_available)
    summary = (
        f"Dots Championship: {_leading_team(points)} accumulated more achievement points"
    )
    return points, [result], summary


def _snake_round(cup: CupConfig, data: CoreRoundData, cup_round: CupRound) -> RoundOutcome:
    result = compute_snake(
        with_estimated_details(data, ScoreBasedPuttEstimator()), SnakeConfig()
    )
    holder_team = next(
        (p.team for p in cup.players if p.id == result.final_snake_holder), None
    )
    winner: Optional[CupTeam] = None
    if holder_team is not None:
        winner = TEAM_B if holder_team == TEAM_A else TEAM_A
    points = _award(winner, cup_round.points_available)
    summary = f"Snake Challenge: {_leading_team(points)} avoided the three-putt penalties"
    return points, [result], summary


_ROUND_SCORERS: Dict[str, Callable[[CupConfig, CoreRoundData, CupRound], RoundOutcome]] = {
    "stroke": _stroke_round,
    "match": _match_round,
    "dots": _dots_round,
    "snake": _snake_round,
}


def create_cup(
    players: Sequence[CupPlayer],
    *,
    name: str = DEFAULT_CUP_NAME,
    rounds: Optional[Sequence[CupRound]] = None,
    total_points_to_win: float = DEFAULT_POINTS_TO_WIN,
) -> CupConfig:
    """Set up a cup with the default four-round schedule unless ``rounds`` is given.

    Players keep their teams when every player has one and the teams are the
    same size; otherwise teams alternate in list order starting with Team A.
    """

    if len(players) < MIN_CUP_PLAYERS or len(players) % 2:
        raise GameValidationError(
            "Pinseekr Cup requires an even number of players (minimum 4)"
        )

    given = [player.team for player in players]
    if None not in given and given.count(TEAM_A) == given.count(TEAM_B):
        assigned = [player.model_copy() for player in players]
    else:
        assigned = [
            player.model_copy(update={"team": TEAMS[index % 2]})
            for index, player in enumerate(players)
        ]

    schedule = (
        [cup_round.model_copy() for cup_round in rounds]
        if rounds is not None
        else _default_rounds()
    )
    return CupConfig(
        name=name,
        players=assigned,
        rounds=schedule,
        total_points_to_win=total_points_to_win,
    )


def play_cup_round(
    cup: CupConfig,
    round_id: str,
    scores: Mapping[str, Sequence[int]],
    *,
    course: Optional[Course] = None,
    hole_details: Optional[Mapping[str, Mapping[int, HoleDetail]]] = None,
) -> CupRoundResult:
    """Score one scheduled round from per-player score lists (index 0 is hole 1)."""

    cup_round = cup.find_round(round_id)
    if cup_round is None:
        raise GameValidationError(f"Round {round_id} not found")
    if cup_round.completed:
        raise GameValidationError(f"Round {round_id} has already been completed")

    data = build_round_data(
        {player.id: scores.get(player.id, []) for player in cup.players},
        {player.id: player.handicap for player in cup.players},
        course,
        hole_details,
    )
    points, results, summary = _ROUND_SCORERS[cup_round.game_mode](
        cup, data, cup_round
    )
    logger.debug(
        "cup round %s (%s): Team A %s, Team B %s",
        round_id,
        cup_round.game_mode,
        _fmt(points[TEAM_A]),
        _fmt(points[TEAM_B]),
    )
    return CupRoundResult(
        round_id=round_id,
        game_mode=cup_round.game_mode,
        points_awarded=points,
        results=results,
        summary=summary,
    )


def record_cup_round(cup: CupConfig, result: CupRoundResult) -> CupConfig:
    """Return a copy of ``cup`` with the played round marked completed."""

    rounds = [
        cup_round.model_copy(update={"completed": True})
        if cup_round.id == result.round_id
        else cup_round
        for cup_round in cup.rounds
    ]
    return cup.model_copy(update={"rounds": rounds})


def _rounds_won(completed_rounds: Sequence[CupRoundResult], team: CupTeam) -> int:
    other = TEAM_B if team == TEAM_A else TEAM_A
    return sum(
        1
        for result in completed_rounds
        if result.points_awarded.get(team, 0.0) > result.points_awarded.get(other, 0.0)
    )


def cup_mvp(
    cup: CupConfig, completed_rounds: Sequence[CupRoundResult]
) -> Optional[CupMvp]:
    """Player with the largest share of team points; shares are split evenly."""

    ranked = [player for player in cup.players if player.team is not None]
    if not completed_rounds or not ranked:
        return None

    sizes = {team: len(cup.team(team)) for team in TEAMS}
    contributions = {
        player.id: sum(
            result.points_awarded.get(player.team, 0.0) for result in completed_rounds
        )
        / sizes[player.team]
        for player in ranked
    }
    best = max(ranked, key=lambda player: contributions[player.id])
    return CupMvp(
        player_id=best.id,
        name=best.name or best.id,
        points_contributed=round_half_up(contributions[best.id], 1),
    )


def cup_results(
    cup: CupConfig, completed_rounds: Sequence[CupRoundResult]
) -> CupResults:
    standings = {
        team: sum(result.points_awarded.get(team, 0.0) for result in completed_rounds)
        for team in TEAMS
    }
    leaderboard = sorted(
        (
            CupStanding(
                team=team,
                points=standings[team],
                rounds_won=_rounds_won(completed_rounds, team),
            )
            for team in TEAMS
        ),
        key=lambda standing: -standing.points,
    )
    is_complete = any(
        points >= cup.total_points_to_win for points in standings.values()
    )
    winner = _lower(-standings[TEAM_A], -standings[TEAM_B]) if is_complete else None
    return CupResults(
        tournament=cup,
        completed_rounds=list(completed_rounds),
        current_standings=standings,
        leaderboard=leaderboard,
        is_complete=is_complete,
        winner=winner,
        mvp=cup_mvp(cup, completed_rounds),
    )


__all__ = [
    "CupConfig",
    "CupMvp",
    "CupPlayer",
    "CupResults",
    "CupRound",
    "CupRoundResult",
    "CupStanding",
    "DEFAULT_CUP_ROUNDS",
    "TEAMS",
    "create_cup",
    "cup_mvp",
    "cup_results",
    "play_cup_round",
    "record_cup_round",
]
