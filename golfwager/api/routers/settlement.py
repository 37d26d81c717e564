from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfwager.api.limits import enforce_round_limits
from golfwager.config import DEFAULT_SPLIT_POLICY
from golfwager.games.dispatch import GameConfig
from golfwager.games.schemas import CoreRoundData, GameValidationError, Payable, SplitPolicy
from golfwager.metrics import SETTLEMENT_TRANSFERS
from golfwager.security import require_api_key
from golfwager.settlement import Expense, RoundSettlement, net, net_balances, settle_round

router = APIRouter(
    prefix="/api/settlement",
    tags=["settlement"],
    dependencies=[Depends(require_api_key)],
)

logger = logging.getLogger(__name__)


class NetRequest(BaseModel):
    payables: List[Payable]


class NetResponse(BaseModel):
    balances: Dict[str, int]
    transfers: List[Payable]


class SettleRoundRequest(BaseModel):
    round: CoreRoundData = Field(validation_alias=AliasChoices("round", "roundData"))
    games: List[GameConfig] = Field(default_factory=list)
    expenses: List[Expense] = Field(default_factory=list)
    expense_policy: SplitPolicy = Field(
        default=DEFAULT_SPLIT_POLICY,
        validation_alias=AliasChoices("expense_policy", "expensePolicy"),
    )

    model_config = ConfigDict(populate_by_name=True)


@router.post("/net", response_model=NetResponse)
def net_payables(payload: NetRequest) -> NetResponse:
    transfers = net(payload.payables)
    SETTLEMENT_TRANSFERS.observe(len(transfers))
    return NetResponse(balances=net_balances(payload.payables), transfers=transfers)


@router.post("/round", response_model=RoundSettlement)
def settle(payload: SettleRoundRequest) -> RoundSettlement:
    enforce_round_limits(payload.round)
    try:
        settlement = settle_round(
            payload.round,
            payload.games,
            payload.expenses,
            expense_policy=payload.expense_policy,
        )
    except GameValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc

    SETTLEMENT_TRANSFERS.observe(len(settlement.transfers))
    logger.info(
        "settled %d games for %d players into %d transfers",
        len(payload.games),
        len(payload.round.players),
        len(settlement.transfers),
    )
    return settlement
