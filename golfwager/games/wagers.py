"""Nassau and skins wager processors."""

from __future__ import annotations

from typing import Dict, List, Literal, Mapping, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfwager.config import DEFAULT_SPLIT_POLICY

from .schemas import (
    GAME_MODE_NAMES,
    CoreRoundData,
    GameMode,
    GameResultBase,
    Payable,
    SplitPolicy,
)
from .splits import split_amount


class WagerConfig(BaseModel):
    use_net: bool = Field(
        default=False, validation_alias=AliasChoices("use_net", "useNet")
    )
    unit_sats: int = Field(
        default=0, ge=0, validation_alias=AliasChoices("unit_sats", "unitSats")
    )
    carry_cap: Optional[int] = Field(
        default=None, ge=1, validation_alias=AliasChoices("carry_cap", "carryCap")
    )

    model_config = ConfigDict(populate_by_name=True)


class NassauConfig(WagerConfig):
    mode: Literal["nassau"] = "nassau"


class SkinsConfig(WagerConfig):
    mode: Literal["skins"] = "skins"
    split_policy: SplitPolicy = Field(
        default=DEFAULT_SPLIT_POLICY,
        validation_alias=AliasChoices("split_policy", "splitPolicy"),
    )


class MatchBreakdown(BaseModel):
    match: str
    holes: List[int]
    winner: Optional[str] = None
    result: Optional[str] = None
    totals: Dict[str, int]


class SkinBreakdown(BaseModel):
    hole: int
    winner: Optional[str] = None
    result: Optional[str] = None
    skins: Optional[int] = None
    skins_voided: Optional[int] = Field(default=None, serialization_alias="skinsVoided")
    remainder: int = 0
    scores: Dict[str, int] = Field(default_factory=dict)


class NassauResult(GameResultBase):
    mode: Literal["nassau"] = "nassau"
    name: str = GAME_MODE_NAMES[GameMode.NASSAU]
    breakdown: List[MatchBreakdown]


class SkinsResult(GameResultBase):
    mode: Literal["skins"] = "skins"
    name: str = GAME_MODE_NAMES[GameMode.SKINS]
    breakdown: List[SkinBreakdown]
    skins_won: Dict[str, int] = Field(serialization_alias="skinsWon")


def unique_low(scores: Mapping[str, int]) -> Optional[str]:
    """Return the player holding the unique lowest score, or ``None`` on a tie."""

    if not scores:
        return None
    best = min(scores.values())
    leaders = [player_id for player_id, score in scores.items() if score == best]
    return leaders[0] if len(leaders) == 1 else None


def segment_totals(
    data: CoreRoundData, holes: Sequence[int], use_net: bool
) -> Dict[str, int]:
    return {
        player_id: sum(data.score(player_id, hole, use_net) for hole in holes)
        for player_id in data.players
    }


def nassau_segments(holes: Sequence[int]) -> List[tuple[str, List[int]]]:
    """Front half, back half and overall match hole sets."""

    ordered = list(holes)
    split = (len(ordered) + 1) // 2
    return [
        ("Front 9", ordered[:split]),
        ("Back 9", ordered[split:]),
        ("Overall", ordered),
    ]


def compute_nassau(data: CoreRoundData, config: NassauConfig) -> NassauResult:
    ledger: List[Payable] = []
    breakdown: List[MatchBreakdown] = []

    for name, holes in nassau_segments(data.hole_numbers()):
        totals = segment_totals(data, holes, config.use_net)
        winner = unique_low(totals)
        if winner is None:
            breakdown.append(
                MatchBreakdown(match=name, holes=holes, result="Push", totals=totals)
            )
            continue

        for player_id in data.players:
            if player_id == winner:
                continue
            ledger.append(
                Payable(
                    from_player=player_id,
                    to_player=winner,
                    amount=config.unit_sats,
                    memo=f"{name} - Nassau",
                )
            )
        breakdown.append(
            MatchBreakdown(match=name, holes=holes, winner=winner, totals=totals)
        )

    return NassauResult(ledger=ledger, breakdown=breakdown)


def compute_skins(data: CoreRoundData, config: SkinsConfig) -> SkinsResult:
    ledger: List[Payable] = []
    breakdown: List[SkinBreakdown] = []
    skins_won = {player_id: 0 for player_id in data.players}
    carry = 1

    for hole in data.hole_numbers():
        scores = {
            player_id: data.score(player_id, hole, config.use_net)
            for player_id in data.players
        }
        winner = unique_low(scores)

        if winner is not None:
            skins = carry
            losers = [player_id for player_id in data.players if player_id != winner]
            label = f"Hole {hole} - {skins} skin{'s' if skins > 1 else ''}"
            shares, remainder = split_amount(
                skins * config.unit_sats, losers, config.split_policy
            )
            for loser, amount in shares:
                ledger.append(
                    Payable(from_player=loser, to_player=winner, amount=amount, memo=label)
                )
            skins_won[winner] += skins
            breakdown.append(
                SkinBreakdown(
                    hole=hole,
                    winner=winner,
                    skins=skins,
                    remainder=remainder,
                    scores=scores,
                )
            )
            carry = 1
            continue

        if config.carry_cap is not None and carry >= config.carry_cap:
            breakdown.append(
                SkinBreakdown(
                    hole=hole,
                    result=f"Carry cap reached ({config.carry_cap}), skins voided",
                    skins_voided=carry,
                    scores=scores,
                )
            )
            carry = 1
            continue

        breakdown.append(
            SkinBreakdown(hole=hole, result="Tie - carry over", scores=scores)
        )
        carry += 1

    return SkinsResult(ledger=ledger, breakdown=breakdown, skins_won=skins_won)


__all__ = [
    "MatchBreakdown",
    "NassauConfig",
    "NassauResult",
    "SkinBreakdown",
    "SkinsConfig",
    "SkinsResult",
    "WagerConfig",
    "compute_nassau",
    "compute_skins",
    "nassau_segments",
    "segment_totals",
    "unique_low",
]
