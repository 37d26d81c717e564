from __future__ import annotations

from fastapi import HTTPException, status

from golfwager.config import get_settings
from golfwager.games.schemas import CoreRoundData


def enforce_round_limits(data: CoreRoundData) -> None:
    """Reject rounds larger than the configured player and hole limits."""

    settings = get_settings()
    if len(data.players) > settings.max_players:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"at most {settings.max_players} players per round",
        )
    if len(data.hole_numbers()) > settings.max_holes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"at most {settings.max_holes} holes per round",
        )
