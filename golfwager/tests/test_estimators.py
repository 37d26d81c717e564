from golfwager.games.estimators import RandomHoleEstimator, with_estimated_details
from golfwager.games.schemas import HoleDetail
from golfwager.tests.factories import flat_round


def test_seeded_estimates_are_reproducible() -> None:
    data = flat_round({"a": [3, 4, 5, 7], "b": [4, 4, 4, 4]})

    first = with_estimated_details(data, RandomHoleEstimator(seed=42))
    second = with_estimated_details(data, RandomHoleEstimator(seed=42))

    assert first.hole_details == second.hole_details
    assert set(first.hole_details["a"]) == {1, 2, 3, 4}


def test_existing_details_are_kept() -> None:
    recorded = HoleDetail(putts=1, fairway_hit=True)
    data = flat_round({"a": [4, 0, 5]}, hole_details={"a": {1: recorded}})

    enriched = with_estimated_details(data, RandomHoleEstimator(seed=1))

    assert enriched.hole_details["a"][1] == recorded
    assert 2 not in enriched.hole_details["a"]
    assert 3 in enriched.hole_details["a"]
    assert set(data.hole_details["a"]) == {1}


def test_estimated_putts_are_plausible() -> None:
    estimator = RandomHoleEstimator(seed=7)

    putts = [estimator.estimate(2, 4).putts for _ in range(50)]

    assert set(putts) <= {1, 2}
