from golfwager.games.schemas import Course, Hole
from golfwager.games.wagers import (
    NassauConfig,
    SkinsConfig,
    compute_nassau,
    compute_skins,
    nassau_segments,
    unique_low,
)
from golfwager.tests.factories import flat_round


def test_unique_low() -> None:
    assert unique_low({"a": 3, "b": 4}) == "a"
    assert unique_low({"a": 3, "b": 3, "c": 5}) is None
    assert unique_low({}) is None


def test_nassau_winner_collects_each_segment() -> None:
    data = flat_round({"a": [3] * 18, "b": [4] * 18, "c": [5] * 18})

    result = compute_nassau(data, NassauConfig(unit_sats=100))

    assert [b.winner for b in result.breakdown] == ["a", "a", "a"]
    assert len(result.ledger) == 6
    assert all(p.to_player == "a" and p.amount == 100 for p in result.ledger)
    assert result.ledger[0].memo == "Front 9 - Nassau"
    assert result.breakdown[0].totals == {"a": 27, "b": 36, "c": 45}


def test_nassau_push_pays_nothing() -> None:
    data = flat_round({"a": [4] * 18, "b": [4] * 18})

    result = compute_nassau(data, NassauConfig(unit_sats=100))

    assert result.ledger == []
    assert [b.result for b in result.breakdown] == ["Push", "Push", "Push"]


def test_nassau_split_on_short_course() -> None:
    segments = dict(nassau_segments(list(range(1, 10))))

    assert segments["Front 9"] == [1, 2, 3, 4, 5]
    assert segments["Back 9"] == [6, 7, 8, 9]
    assert segments["Overall"] == list(range(1, 10))


def test_nassau_uses_course_holes() -> None:
    course = Course(holes={n: Hole(number=n) for n in range(1, 10)})
    data = flat_round({"a": [3] * 9, "b": [4] * 9}, course=course)

    result = compute_nassau(data, NassauConfig(unit_sats=10))

    assert [b.holes for b in result.breakdown][0] == [1, 2, 3, 4, 5]
    assert sum(p.amount for p in result.ledger) == 30


def test_skins_all_ties_pay_nothing() -> None:
    data = flat_round({"a": [4] * 18, "b": [4] * 18, "c": [4] * 18})

    result = compute_skins(data, SkinsConfig(unit_sats=100))

    assert result.ledger == []
    assert all(b.result == "Tie - carry over" for b in result.breakdown)
    assert result.skins_won == {"a": 0, "b": 0, "c": 0}


def test_skins_carry_over() -> None:
    data = flat_round({"a": [4, 4, 3] + [4] * 15, "b": [4] * 18})

    result = compute_skins(data, SkinsConfig(unit_sats=100))

    assert result.skins_won == {"a": 3, "b": 0}
    assert len(result.ledger) == 1
    payable = result.ledger[0]
    assert (payable.from_player, payable.to_player, payable.amount) == ("b", "a", 300)
    assert payable.memo == "Hole 3 - 3 skins"
    assert result.breakdown[2].skins == 3


def test_skins_carry_cap_voids_pot() -> None:
    data = flat_round({"a": [4, 4, 3] + [4] * 15, "b": [4] * 18})

    result = compute_skins(data, SkinsConfig(unit_sats=100, carry_cap=2))

    assert result.breakdown[1].skins_voided == 2
    assert result.breakdown[2].skins == 1
    assert [p.amount for p in result.ledger] == [100]


def test_skins_split_remainder_policies() -> None:
    scores = {"a": [3] + [4] * 17, "b": [4] * 18, "c": [4] * 18, "d": [4] * 18}

    distributed = compute_skins(
        flat_round(scores), SkinsConfig(unit_sats=100, split_policy="distribute")
    )
    floored = compute_skins(
        flat_round(scores), SkinsConfig(unit_sats=100, split_policy="floor")
    )

    assert [p.amount for p in distributed.ledger] == [34, 33, 33]
    assert distributed.breakdown[0].remainder == 0
    assert [p.amount for p in floored.ledger] == [33, 33, 33]
    assert floored.breakdown[0].remainder == 1


def test_skins_net_scoring(sample_round) -> None:
    gross = compute_skins(sample_round, SkinsConfig(unit_sats=10))
    net = compute_skins(sample_round, SkinsConfig(unit_sats=10, use_net=True))

    assert gross.breakdown[5].winner == "alice"
    assert sum(gross.skins_won.values()) <= 18
    assert net.breakdown[0].scores == {"alice": 4, "bob": 4, "charlie": 3}
