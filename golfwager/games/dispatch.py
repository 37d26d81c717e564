"""Single entry point routing a game config to its engine."""

from __future__ import annotations

import logging
from typing import Annotated, Callable, Dict, Union

from pydantic import Field

from .dots import DotsConfig, DotsResult, compute_dots
from .match import MatchConfig, MatchResult, compute_match
from .schemas import CoreRoundData, GameMode, GameValidationError
from .sixes import SixesConfig, SixesResult, compute_sixes
from .snake import SnakeConfig, SnakeResult, compute_snake
from .stableford import StablefordConfig, StablefordResult, compute_stableford
from .stroke import StrokeConfig, StrokeResult, compute_stroke
from .wagers import (
    NassauConfig,
    NassauResult,
    SkinsConfig,
    SkinsResult,
    compute_nassau,
    compute_skins,
)

logger = logging.getLogger(__name__)

GameConfig = Annotated[
    Union[
        StrokeConfig,
        MatchConfig,
        NassauConfig,
        SkinsConfig,
        DotsConfig,
        SnakeConfig,
        SixesConfig,
        StablefordConfig,
    ],
    Field(discriminator="mode"),
]

GameResult = Annotated[
    Union[
        StrokeResult,
        MatchResult,
        NassauResult,
        SkinsResult,
        DotsResult,
        SnakeResult,
        SixesResult,
        StablefordResult,
    ],
    Field(discriminator="mode"),
]

_ENGINES: Dict[GameMode, Callable[[CoreRoundData, object], object]] = {
    GameMode.STROKE_PLAY: compute_stroke,
    GameMode.MATCH_PLAY: compute_match,
    GameMode.NASSAU: compute_nassau,
    GameMode.SKINS: compute_skins,
    GameMode.DOTS: compute_dots,
    GameMode.SNAKE: compute_snake,
    GameMode.SIXES: compute_sixes,
    GameMode.STABLEFORD: compute_stableford,
}

_missing = set(GameMode) - set(_ENGINES)
if _missing:  # pragma: no cover - import-time guard
    raise RuntimeError(f"no engine registered for modes: {sorted(m.value for m in _missing)}")


def compute(data: CoreRoundData, config: GameConfig) -> GameResult:
    """Run the engine matching ``config.mode`` over ``data``."""

    try:
        mode = GameMode(config.mode)
    except ValueError:
        raise GameValidationError(f"Unknown game mode: {config.mode!r}") from None

    logger.debug("computing %s for %d players", mode.value, len(data.players))
    return _ENGINES[mode](data, config)


__all__ = ["GameConfig", "GameResult", "compute"]
