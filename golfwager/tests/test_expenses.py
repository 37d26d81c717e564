from golfwager.settlement import Expense, expense_balances, expense_payables
from golfwager.settlement.expenses import expense_shares


def test_equal_split_skips_payer() -> None:
    expense = Expense(
        id="fees", description="Green fees", amount_sats=3000, paid_by="a",
        split_between=["a", "b", "c"],
    )

    ledger = expense_payables([expense])

    assert [(p.from_player, p.to_player, p.amount) for p in ledger] == [
        ("b", "a", 1000),
        ("c", "a", 1000),
    ]
    assert ledger[0].memo == "Expense: Green fees"


def test_equal_split_remainder() -> None:
    expense = Expense(id="cart", amount_sats=1000, paid_by="a", split_between=["a", "b", "c"])

    assert expense_shares(expense, "distribute") == [("a", 334), ("b", 333), ("c", 333)]
    assert expense_shares(expense, "floor") == [("a", 333), ("b", 333), ("c", 333)]


def test_percentage_split() -> None:
    expense = Expense.model_validate(
        {
            "id": "food",
            "amountSats": 1001,
            "paidBy": "b",
            "splitMode": "percentage",
            "customSplits": [
                {"playerId": "a", "value": 50},
                {"playerId": "b", "value": 30},
                {"playerId": "c", "value": 20},
            ],
        }
    )

    assert expense_shares(expense, "distribute") == [("a", 501), ("b", 300), ("c", 200)]
    assert expense_shares(expense, "floor") == [("a", 500), ("b", 300), ("c", 200)]


def test_fixed_split() -> None:
    expense = Expense(
        id="balls", amount_sats=900, paid_by="c", split_mode="fixed",
        custom_splits=[{"player_id": "a", "value": 600}, {"player_id": "c", "value": 300}],
    )

    ledger = expense_payables([expense])

    assert [(p.from_player, p.amount) for p in ledger] == [("a", 600)]


def test_expense_balances() -> None:
    expenses = [
        Expense(id="fees", amount_sats=3000, paid_by="a", split_between=["a", "b", "c"]),
        Expense(id="beer", amount_sats=600, paid_by="b", split_between=["a", "b"]),
    ]

    balances = {b.player_id: b for b in expense_balances(expenses)}

    assert balances["a"].total_paid == 3000
    assert balances["a"].total_owed == 1300
    assert balances["a"].net_balance == 1700
    assert balances["c"].net_balance == -1000
    assert sum(b.net_balance for b in balances.values()) == 0
