"""Snake: the last player to three-putt holds the snake and pays the penalty."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfwager.config import SNAKE_PENALTY_SATS

from .schemas import (
    GAME_MODE_NAMES,
    CoreRoundData,
    GameMode,
    GameResultBase,
    Payable,
    SplitPolicy,
)
from .splits import split_amount

DEFAULT_PUTTS = 2
POT_RECIPIENT = "pot"


class SnakeConfig(BaseModel):
    mode: Literal["snake"] = "snake"
    penalty_amount: int = Field(
        default=SNAKE_PENALTY_SATS,
        ge=0,
        validation_alias=AliasChoices("penalty_amount", "penaltyAmount"),
    )
    three_putt_threshold: int = Field(
        default=3,
        ge=1,
        validation_alias=AliasChoices("three_putt_threshold", "threePuttThreshold"),
    )
    distribute_to_group: bool = Field(
        default=False,
        validation_alias=AliasChoices("distribute_to_group", "distributeToGroup"),
    )
    # Which three-putter takes the snake when several do so on the same hole,
    # in player-list order.
    tie_break: Literal["last", "first"] = Field(
        default="last", validation_alias=AliasChoices("tie_break", "tieBreak")
    )
    split_policy: SplitPolicy = Field(
        default="floor", validation_alias=AliasChoices("split_policy", "splitPolicy")
    )
    pot_recipient: str = Field(
        default=POT_RECIPIENT,
        validation_alias=AliasChoices("pot_recipient", "potRecipient"),
    )

    model_config = ConfigDict(populate_by_name=True)


class SnakeHoleResult(BaseModel):
    hole: int
    player_putts: Dict[str, int] = Field(serialization_alias="playerPutts")
    three_putters: List[str] = Field(serialization_alias="threePutters")
    snake_holder: Optional[str] = Field(serialization_alias="snakeHolder")


class SnakeRecipient(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    amount: int


class SnakePenalty(BaseModel):
    loser: str
    amount: int
    recipients: List[SnakeRecipient]
    remainder: int = 0


class SnakeResult(GameResultBase):
    mode: Literal["snake"] = "snake"
    name: str = GAME_MODE_NAMES[GameMode.SNAKE]
    hole_by_hole: List[SnakeHoleResult] = Field(serialization_alias="holeByHole")
    final_snake_holder: Optional[str] = Field(serialization_alias="finalSnakeHolder")
    snake_passes: int = Field(serialization_alias="snakePasses")
    three_putt_summary: Dict[str, int] = Field(serialization_alias="threePuttSummary")
    penalty: Optional[SnakePenalty] = None


def _putts(data: CoreRoundData, player_id: str, hole: int) -> int:
    detail = data.detail(player_id, hole)
    if detail is None or detail.putts is None:
        return DEFAULT_PUTTS
    return detail.putts


def _penalty(
    holder: str, players: List[str], config: SnakeConfig
) -> tuple[SnakePenalty, List[Payable]]:
    if config.distribute_to_group:
        recipients = [(config.pot_recipient, config.penalty_amount)]
        remainder = 0
    else:
        others = [player_id for player_id in players if player_id != holder]
        recipients, remainder = split_amount(
            config.penalty_amount, others, config.split_policy
        )

    ledger = [
        Payable(
            from_player=holder,
            to_player=recipient,
            amount=amount,
            memo="Snake penalty",
        )
        for recipient, amount in recipients
        if amount > 0
    ]
    penalty = SnakePenalty(
        loser=holder,
        amount=config.penalty_amount,
        recipients=[
            SnakeRecipient(player_id=recipient, amount=amount)
            for recipient, amount in recipients
        ],
        remainder=remainder,
    )
    return penalty, ledger


def compute_snake(data: CoreRoundData, config: SnakeConfig) -> SnakeResult:
    holder: Optional[str] = None
    passes = 0
    summary = {player_id: 0 for player_id in data.players}
    hole_results: List[SnakeHoleResult] = []

    for hole in data.hole_numbers():
        player_putts = {
            player_id: _putts(data, player_id, hole) for player_id in data.players
        }
        three_putters = [
            player_id
            for player_id in data.players
            if player_putts[player_id] >= config.three_putt_threshold
        ]
        for player_id in three_putters:
            summary[player_id] += 1
            passes += 1
        if three_putters:
            holder = three_putters[-1] if config.tie_break == "last" else three_putters[0]

        hole_results.append(
            SnakeHoleResult(
                hole=hole,
                player_putts=player_putts,
                three_putters=three_putters,
                snake_holder=holder,
            )
        )

    penalty: Optional[SnakePenalty] = None
    ledger: List[Payable] = []
    if holder is not None and config.penalty_amount > 0:
        penalty, ledger = _penalty(holder, data.players, config)

    return SnakeResult(
        ledger=ledger,
        hole_by_hole=hole_results,
        final_snake_holder=holder,
        snake_passes=passes,
        three_putt_summary=summary,
        penalty=penalty,
    )


def snake_status(result: SnakeResult) -> str:
    if not result.final_snake_holder:
        return "No three-putts this round - no snake penalty!"
    if result.penalty:
        return (
            f"{result.final_snake_holder} holds the snake and owes "
            f"{result.penalty.amount} sats!"
        )
    return f"{result.final_snake_holder} holds the snake"


def three_putt_summary(result: SnakeResult) -> List[str]:
    return [
        f"{player_id}: {count} three-putt{'s' if count > 1 else ''}"
        for player_id, count in result.three_putt_summary.items()
        if count > 0
    ]


__all__ = [
    "POT_RECIPIENT",
    "SnakeConfig",
    "SnakeResult",
    "compute_snake",
    "snake_status",
    "three_putt_summary",
]
