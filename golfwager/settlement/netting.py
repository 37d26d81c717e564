"""Collapse a ledger of payables into a minimal set of settling transfers."""

from __future__ import annotations

import heapq
import logging
from typing import Dict, Iterable, List, Tuple

from golfwager.games.schemas import Payable

logger = logging.getLogger(__name__)

NET_MEMO = "Net settlement"

# (-remaining magnitude, first-seen order, player id)
_HeapEntry = Tuple[int, int, str]


def net_balances(payables: Iterable[Payable]) -> Dict[str, int]:
    """Received minus paid per player. The balances always sum to zero."""

    balances: Dict[str, int] = {}
    for payable in payables:
        balances[payable.from_player] = balances.get(payable.from_player, 0) - payable.amount
        balances[payable.to_player] = balances.get(payable.to_player, 0) + payable.amount
    return balances


def _heap(balances: Dict[str, int], *, creditors: bool) -> List[_HeapEntry]:
    entries = [
        (-abs(balance), order, player_id)
        for order, (player_id, balance) in enumerate(balances.items())
        if (balance > 0 if creditors else balance < 0)
    ]
    heapq.heapify(entries)
    return entries


def net(payables: Iterable[Payable], *, memo: str = NET_MEMO) -> List[Payable]:
    """Greedy largest-debtor to largest-creditor netting.

    Every player's received minus paid is preserved and the result holds at
    most one transfer fewer than the number of players with a nonzero
    balance. Must be called once over a round's full ledger.
    """

    balances = net_balances(payables)
    creditors = _heap(balances, creditors=True)
    debtors = _heap(balances, creditors=False)
    transfers: List[Payable] = []

    while creditors and debtors:
        neg_credit, credit_order, creditor = heapq.heappop(creditors)
        neg_debt, debt_order, debtor = heapq.heappop(debtors)
        credit, debt = -neg_credit, -neg_debt
        amount = min(credit, debt)
        transfers.append(
            Payable(from_player=debtor, to_player=creditor, amount=amount, memo=memo)
        )
        if credit > amount:
            heapq.heappush(creditors, (amount - credit, credit_order, creditor))
        if debt > amount:
            heapq.heappush(debtors, (amount - debt, debt_order, debtor))

    logger.debug(
        "netted %d balances into %d transfers", len(balances), len(transfers)
    )
    return transfers


__all__ = ["NET_MEMO", "net", "net_balances"]
