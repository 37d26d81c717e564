"""Scoring and wager engines for golf game modes."""

from .dispatch import GameConfig, GameResult, compute  # noqa: F401
from .dots import DotsConfig, DotsResult, compute_dots  # noqa: F401
from .match import (  # noqa: F401
    MatchConfig,
    MatchResult,
    compute_match,
    format_match_status,
    match_status,
)
from .schemas import (  # noqa: F401
    CoreRoundData,
    Course,
    GameMode,
    GameValidationError,
    Hole,
    HoleDetail,
    Payable,
)
from .sixes import SixesConfig, SixesResult, compute_sixes  # noqa: F401
from .snake import SnakeConfig, SnakeResult, compute_snake  # noqa: F401
from .stableford import (  # noqa: F401
    StablefordConfig,
    StablefordResult,
    compute_stableford,
)
from .stroke import StrokeConfig, StrokeResult, compute_stroke  # noqa: F401
from .wagers import (  # noqa: F401
    NassauConfig,
    NassauResult,
    SkinsConfig,
    SkinsResult,
    compute_nassau,
    compute_skins,
)
