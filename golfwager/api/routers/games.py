from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfwager.api.limits import enforce_round_limits
from golfwager.games.dispatch import GameConfig, GameResult, compute
from golfwager.games.schemas import (
    GAME_MODE_NAMES,
    CoreRoundData,
    GameMode,
    GameValidationError,
)
from golfwager.metrics import GAME_COMPUTE_SECONDS, GAMES_COMPUTED
from golfwager.security import require_api_key

router = APIRouter(
    prefix="/api/games", tags=["games"], dependencies=[Depends(require_api_key)]
)

logger = logging.getLogger(__name__)


class ComputeGameRequest(BaseModel):
    round: CoreRoundData = Field(validation_alias=AliasChoices("round", "roundData"))
    game: GameConfig

    model_config = ConfigDict(populate_by_name=True)


@router.get("/modes")
def list_modes() -> List[Dict[str, str]]:
    return [
        {"mode": mode.value, "name": GAME_MODE_NAMES[mode]} for mode in GameMode
    ]


@router.post("/compute", response_model=GameResult)
def compute_game(payload: ComputeGameRequest) -> GameResult:
    enforce_round_limits(payload.round)
    try:
        with GAME_COMPUTE_SECONDS.labels(mode=payload.game.mode).time():
            result = compute(payload.round, payload.game)
    except GameValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc

    GAMES_COMPUTED.labels(mode=payload.game.mode).inc()
    logger.info(
        "computed %s for %d players (%d payables)",
        payload.game.mode,
        len(payload.round.players),
        len(result.ledger),
    )
    return result
