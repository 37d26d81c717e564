"""Round completion: run every configured game, merge ledgers, net once."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from pydantic import BaseModel, Field

from golfwager.config import DEFAULT_SPLIT_POLICY
from golfwager.games.dispatch import GameConfig, GameResult, compute
from golfwager.games.schemas import CoreRoundData, Payable, SplitPolicy
from golfwager.telemetry.events import record_round_settled

from .expenses import Expense, expense_payables
from .netting import net, net_balances

logger = logging.getLogger(__name__)


class RoundSettlement(BaseModel):
    results: Dict[str, GameResult]
    ledger: List[Payable]
    balances: Dict[str, int]
    transfers: List[Payable]


def settle_round(
    data: CoreRoundData,
    games: Sequence[GameConfig],
    expenses: Sequence[Expense] = (),
    *,
    expense_policy: SplitPolicy = DEFAULT_SPLIT_POLICY,
) -> RoundSettlement:
    """Compute every game for ``data`` and net the union of their ledgers.

    Results are keyed by mode; configuring the same mode twice keeps the
    last result but both ledgers are settled.
    """

    results: Dict[str, GameResult] = {}
    ledger: List[Payable] = []
    for config in games:
        result = compute(data, config)
        results[config.mode] = result
        ledger.extend(result.ledger)

    ledger.extend(expense_payables(expenses, expense_policy))

    transfers = net(ledger)
    balances = net_balances(ledger)
    logger.debug(
        "settled round for %d players: %d payables -> %d transfers",
        len(data.players),
        len(ledger),
        len(transfers),
    )
    record_round_settled(
        modes=[config.mode for config in games],
        players=len(data.players),
        ledger_size=len(ledger),
        transfers=len(transfers),
        volume_sats=sum(transfer.amount for transfer in transfers),
    )
    return RoundSettlement(
        results=results, ledger=ledger, balances=balances, transfers=transfers
    )


__all__ = ["RoundSettlement", "settle_round"]
