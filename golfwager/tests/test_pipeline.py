import pytest

from golfwager.games.match import MatchConfig
from golfwager.games.schemas import GameValidationError
from golfwager.games.stroke import StrokeConfig
from golfwager.games.wagers import NassauConfig, SkinsConfig
from golfwager.settlement import Expense, net_balances, settle_round
from golfwager.telemetry import set_settlement_telemetry_emitter


def test_nassau_round_settles_to_winner(sample_round) -> None:
    settlement = settle_round(sample_round, [StrokeConfig(), NassauConfig(unit_sats=100)])

    assert set(settlement.results) == {"stroke-play", "nassau"}
    assert len(settlement.ledger) == 6
    assert settlement.balances == {"alice": -300, "charlie": 600, "bob": -300}
    assert [(t.from_player, t.to_player, t.amount) for t in settlement.transfers] == [
        ("alice", "charlie", 300),
        ("bob", "charlie", 300),
    ]


def test_games_and_expenses_net_together(sample_round) -> None:
    expenses = [
        Expense(id="fees", amount_sats=900, paid_by="charlie",
                split_between=["alice", "bob", "charlie"]),
    ]

    settlement = settle_round(
        sample_round,
        [NassauConfig(unit_sats=100), SkinsConfig(unit_sats=10, use_net=True)],
        expenses,
    )

    assert sum(settlement.balances.values()) == 0
    nonzero = {p: b for p, b in settlement.balances.items() if b}
    assert net_balances(settlement.transfers) == nonzero
    assert len(settlement.transfers) <= max(len(nonzero) - 1, 0)
    assert any(p.memo.startswith("Expense:") for p in settlement.ledger)


def test_invalid_game_aborts_settlement(sample_round) -> None:
    with pytest.raises(GameValidationError):
        settle_round(sample_round, [NassauConfig(unit_sats=100), MatchConfig()])


def test_settlement_emits_telemetry(sample_round) -> None:
    events = []
    set_settlement_telemetry_emitter(lambda name, payload: events.append((name, payload)))

    settle_round(sample_round, [NassauConfig(unit_sats=100)])

    assert len(events) == 1
    name, payload = events[0]
    assert name == "round.settled"
    assert payload["modes"] == ["nassau"]
    assert payload["players"] == 3
    assert payload["transfers"] == 2
    assert payload["volumeSats"] == 600


def test_empty_round_settles_to_nothing(sample_round) -> None:
    settlement = settle_round(sample_round, [])

    assert settlement.results == {}
    assert settlement.transfers == []
