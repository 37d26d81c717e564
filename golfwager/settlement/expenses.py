"""Shared round expenses (green fees, carts, food) as payables."""

from __future__ import annotations

from typing import Dict, Iterable, List, Literal, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfwager.config import DEFAULT_SPLIT_POLICY
from golfwager.games.schemas import Payable, SplitPolicy
from golfwager.games.splits import split_amount

SplitMode = Literal["equal", "percentage", "fixed"]


class CustomSplit(BaseModel):
    player_id: str = Field(validation_alias=AliasChoices("player_id", "playerId"))
    value: int = Field(ge=0)

    model_config = ConfigDict(populate_by_name=True)


class Expense(BaseModel):
    id: str
    description: str = ""
    amount_sats: int = Field(
        ge=0, validation_alias=AliasChoices("amount_sats", "amountSats")
    )
    paid_by: str = Field(
        validation_alias=AliasChoices("paid_by", "paidBy", "paidByPlayerId")
    )
    split_between: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "split_between", "splitBetween", "splitBetweenPlayerIds"
        ),
    )
    split_mode: SplitMode = Field(
        default="equal", validation_alias=AliasChoices("split_mode", "splitMode")
    )
    custom_splits: List[CustomSplit] = Field(
        default_factory=list,
        validation_alias=AliasChoices("custom_splits", "customSplits"),
    )

    model_config = ConfigDict(populate_by_name=True)


class ExpenseBalance(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    total_paid: int = Field(serialization_alias="totalPaid")
    total_owed: int = Field(serialization_alias="totalOwed")
    net_balance: int = Field(serialization_alias="netBalance")


def expense_shares(
    expense: Expense, policy: SplitPolicy = DEFAULT_SPLIT_POLICY
) -> List[Tuple[str, int]]:
    """Integer share of ``expense`` owed by each participant, payer included."""

    if expense.split_mode == "fixed" and expense.custom_splits:
        return [(split.player_id, split.value) for split in expense.custom_splits]

    if expense.split_mode == "percentage" and expense.custom_splits:
        raw = [
            (split.player_id, expense.amount_sats * split.value)
            for split in expense.custom_splits
        ]
        shares = [(player_id, scaled // 100) for player_id, scaled in raw]
        if policy == "floor":
            return shares
        target = sum(scaled for _, scaled in raw) // 100
        leftover = target - sum(amount for _, amount in shares)
        return [
            (player_id, amount + (1 if index < leftover else 0))
            for index, (player_id, amount) in enumerate(shares)
        ]

    shares, _ = split_amount(expense.amount_sats, expense.split_between, policy)
    return shares


def expense_payables(
    expenses: Iterable[Expense], policy: SplitPolicy = DEFAULT_SPLIT_POLICY
) -> List[Payable]:
    ledger: List[Payable] = []
    for expense in expenses:
        memo = f"Expense: {expense.description or expense.id}"
        for player_id, amount in expense_shares(expense, policy):
            if player_id == expense.paid_by or amount <= 0:
                continue
            ledger.append(
                Payable(
                    from_player=player_id,
                    to_player=expense.paid_by,
                    amount=amount,
                    memo=memo,
                )
            )
    return ledger


def expense_balances(
    expenses: Iterable[Expense], policy: SplitPolicy = DEFAULT_SPLIT_POLICY
) -> List[ExpenseBalance]:
    paid: Dict[str, int] = {}
    owed: Dict[str, int] = {}
    for expense in expenses:
        paid[expense.paid_by] = paid.get(expense.paid_by, 0) + expense.amount_sats
        owed.setdefault(expense.paid_by, 0)
        for player_id, amount in expense_shares(expense, policy):
            owed[player_id] = owed.get(player_id, 0) + amount
            paid.setdefault(player_id, 0)

    return [
        ExpenseBalance(
            player_id=player_id,
            total_paid=paid[player_id],
            total_owed=owed.get(player_id, 0),
            net_balance=paid[player_id] - owed.get(player_id, 0),
        )
        for player_id in paid
    ]


__all__ = [
    "CustomSplit",
    "Expense",
    "ExpenseBalance",
    "expense_balances",
    "expense_payables",
    "expense_shares",
]
