"""Pydantic models shared by the scoring and wager engines."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from golfwager.config import coerce_boolish

DEFAULT_PAR = 4
DEFAULT_HOLE_COUNT = 18

SplitPolicy = Literal["floor", "distribute"]


class GameValidationError(ValueError):
    """Raised when a game cannot be computed for the supplied round."""


class GameMode(str, Enum):
    STROKE_PLAY = "stroke-play"
    MATCH_PLAY = "match-play"
    NASSAU = "nassau"
    SKINS = "skins"
    DOTS = "dots"
    SNAKE = "snake"
    SIXES = "sixes"
    STABLEFORD = "stableford"


GAME_MODE_NAMES: Dict[GameMode, str] = {
    GameMode.STROKE_PLAY: "Stroke Play",
    GameMode.MATCH_PLAY: "Match Play",
    GameMode.NASSAU: "Nassau",
    GameMode.SKINS: "Skins",
    GameMode.DOTS: "Dots",
    GameMode.SNAKE: "Snake",
    GameMode.SIXES: "Sixes",
    GameMode.STABLEFORD: "Stableford",
}


class Hole(BaseModel):
    """A course hole. ``number`` is optional when the hole is keyed by number."""

    number: Optional[int] = Field(default=None, ge=1)
    par: int = Field(default=DEFAULT_PAR, gt=0)
    stroke_index: Optional[int] = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("stroke_index", "strokeIndex"),
        serialization_alias="strokeIndex",
    )

    model_config = ConfigDict(populate_by_name=True)


class Course(BaseModel):
    holes: Dict[int, Hole] = Field(default_factory=dict)

    def hole_numbers(self) -> List[int]:
        if not self.holes:
            return list(range(1, DEFAULT_HOLE_COUNT + 1))
        return sorted(self.holes)

    def par(self, hole: int) -> int:
        entry = self.holes.get(hole)
        return entry.par if entry is not None else DEFAULT_PAR

    def stroke_index(self, hole: int) -> int:
        entry = self.holes.get(hole)
        if entry is None or entry.stroke_index is None:
            return hole
        return entry.stroke_index


class HoleDetail(BaseModel):
    """Per-shot detail recorded for a player on a hole."""

    putts: Optional[int] = Field(default=None, ge=0)
    fairway_hit: bool = Field(
        default=False,
        validation_alias=AliasChoices("fairway_hit", "fairwayHit", "fairways"),
        serialization_alias="fairwayHit",
    )
    green_in_regulation: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "green_in_regulation", "greenInRegulation", "gir", "greens"
        ),
        serialization_alias="greenInRegulation",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("fairway_hit", "green_in_regulation", mode="before")
    @classmethod
    def _boolish(cls, value: object) -> object:
        coerced = coerce_boolish(value)
        return value if coerced is None else coerced


class CoreRoundData(BaseModel):
    """Snapshot of a round: players, recorded strokes, pops and course."""

    players: List[str]
    strokes: Dict[str, Dict[int, int]] = Field(default_factory=dict)
    pops: Optional[Dict[str, Dict[int, int]]] = Field(
        default=None,
        validation_alias=AliasChoices("pops", AliasPath("handicap", "pops")),
    )
    course: Course = Field(default_factory=Course)
    hole_details: Dict[str, Dict[int, HoleDetail]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("hole_details", "holeDetails"),
        serialization_alias="holeDetails",
    )

    model_config = ConfigDict(populate_by_name=True)

    def hole_numbers(self) -> List[int]:
        return self.course.hole_numbers()

    def has_stroke(self, player: str, hole: int) -> bool:
        return hole in self.strokes.get(player, {})

    def gross(self, player: str, hole: int) -> int:
        return self.strokes.get(player, {}).get(hole) or 0

    def pops_for(self, player: str, hole: int) -> int:
        if not self.pops:
            return 0
        return self.pops.get(player, {}).get(hole) or 0

    def score(self, player: str, hole: int, use_net: bool) -> int:
        gross = self.gross(player, hole)
        if not use_net:
            return gross
        return gross - self.pops_for(player, hole)

    def detail(self, player: str, hole: int) -> Optional[HoleDetail]:
        return self.hole_details.get(player, {}).get(hole)


class Payable(BaseModel):
    """A single obligation: ``from_player`` owes ``amount`` sats to ``to_player``."""

    from_player: str = Field(
        validation_alias=AliasChoices("from", "from_player", "fromPlayer"),
        serialization_alias="from",
    )
    to_player: str = Field(
        validation_alias=AliasChoices("to", "to_player", "toPlayer"),
        serialization_alias="to",
    )
    amount: int = Field(ge=0)
    memo: str = ""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class LeaderboardEntry(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    position: int
    score: int

    model_config = ConfigDict(populate_by_name=True)


class GameResultBase(BaseModel):
    name: str
    ledger: List[Payable] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "CoreRoundData",
    "Course",
    "DEFAULT_HOLE_COUNT",
    "DEFAULT_PAR",
    "GAME_MODE_NAMES",
    "GameMode",
    "GameResultBase",
    "GameValidationError",
    "Hole",
    "HoleDetail",
    "LeaderboardEntry",
    "Payable",
    "SplitPolicy",
]
