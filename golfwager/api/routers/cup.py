from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfwager.games.cup import (
    DEFAULT_CUP_NAME,
    DEFAULT_POINTS_TO_WIN,
    CupConfig,
    CupGameMode,
    CupPlayer,
    CupResults,
    CupRound,
    CupRoundResult,
    create_cup,
    cup_results,
    play_cup_round,
)
from golfwager.games.schemas import Course, GameValidationError
from golfwager.security import require_api_key

router = APIRouter(
    prefix="/api/cup", tags=["cup"], dependencies=[Depends(require_api_key)]
)

logger = logging.getLogger(__name__)


class CreateCupRequest(BaseModel):
    players: List[CupPlayer]
    name: str = DEFAULT_CUP_NAME
    rounds: Optional[List[CupRound]] = None
    total_points_to_win: float = Field(
        default=DEFAULT_POINTS_TO_WIN,
        gt=0,
        validation_alias=AliasChoices("total_points_to_win", "totalPointsToWin"),
    )

    model_config = ConfigDict(populate_by_name=True)


class PlayCupRoundRequest(BaseModel):
    cup: CupConfig
    scores: Dict[str, List[int]]
    course: Optional[Course] = None


class CompletedCupRound(BaseModel):
    """A played round as returned by the play endpoint; game detail is ignored."""

    round_id: str = Field(validation_alias=AliasChoices("round_id", "roundId"))
    game_mode: CupGameMode = Field(
        validation_alias=AliasChoices("game_mode", "gameMode")
    )
    points_awarded: Dict[str, float] = Field(
        validation_alias=AliasChoices("points_awarded", "pointsAwarded")
    )
    summary: str = ""

    def to_result(self) -> CupRoundResult:
        return CupRoundResult(
            round_id=self.round_id,
            game_mode=self.game_mode,
            points_awarded=self.points_awarded,
            summary=self.summary,
        )


class CupResultsRequest(BaseModel):
    cup: CupConfig
    completed_rounds: List[CompletedCupRound] = Field(
        default_factory=list,
        validation_alias=AliasChoices("completed_rounds", "completedRounds"),
    )

    model_config = ConfigDict(populate_by_name=True)


def _unprocessable(exc: GameValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
    )


@router.post("", response_model=CupConfig)
def create(payload: CreateCupRequest) -> CupConfig:
    try:
        return create_cup(
            payload.players,
            name=payload.name,
            rounds=payload.rounds,
            total_points_to_win=payload.total_points_to_win,
        )
    except GameValidationError as exc:
        raise _unprocessable(exc) from exc


@router.post("/rounds/{round_id}", response_model=CupRoundResult)
def play_round(round_id: str, payload: PlayCupRoundRequest) -> CupRoundResult:
    try:
        result = play_cup_round(
            payload.cup, round_id, payload.scores, course=payload.course
        )
    except GameValidationError as exc:
        raise _unprocessable(exc) from exc

    logger.info("cup %s: %s", payload.cup.name, result.summary)
    return result


@router.post("/results", response_model=CupResults)
def results(payload: CupResultsRequest) -> CupResults:
    return cup_results(
        payload.cup, [entry.to_result() for entry in payload.completed_rounds]
    )
