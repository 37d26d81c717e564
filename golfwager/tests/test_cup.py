import pytest

from golfwager.games.cup import (
    CupPlayer,
    create_cup,
    cup_results,
    play_cup_round,
    record_cup_round,
)
from golfwager.games.schemas import GameValidationError

PLAYERS = [CupPlayer(id=f"p{n}", name=f"Player {n}") for n in range(1, 5)]
# Team A (p1, p3) shoots level par, Team B (p2, p4) double bogeys everything.
LOPSIDED = {"p1": [4] * 18, "p2": [6] * 18, "p3": [4] * 18, "p4": [6] * 18}
EVEN = {player.id: [4] * 18 for player in PLAYERS}


@pytest.fixture
def cup():
    return create_cup(PLAYERS)


def test_teams_alternate_in_player_order(cup) -> None:
    assert [p.id for p in cup.team("Team A")] == ["p1", "p3"]
    assert [p.id for p in cup.team("Team B")] == ["p2", "p4"]
    assert [r.id for r in cup.rounds] == ["round-1", "round-2", "round-3", "round-4"]
    assert cup.total_points_to_win == 9


def test_balanced_given_teams_are_kept() -> None:
    players = [
        CupPlayer(id="a", team="Team B"),
        CupPlayer(id="b", team="Team B"),
        CupPlayer(id="c", team="Team A"),
        CupPlayer(id="d", team="Team A"),
    ]

    cup = create_cup(players)

    assert [p.id for p in cup.team("Team A")] == ["c", "d"]


def test_unbalanced_given_teams_are_reassigned() -> None:
    players = [CupPlayer(id=name, team="Team A") for name in "abcd"]

    cup = create_cup(players)

    assert [p.id for p in cup.team("Team B")] == ["b", "d"]


@pytest.mark.parametrize("count", [2, 3, 5])
def test_needs_even_field_of_four(count) -> None:
    players = [CupPlayer(id=str(n)) for n in range(count)]

    with pytest.raises(GameValidationError, match="even number of players"):
        create_cup(players)


def test_stroke_round_goes_to_lower_team(cup) -> None:
    result = play_cup_round(cup, "round-1", LOPSIDED)

    assert result.game_mode == "stroke"
    assert result.points_awarded == {"Team A": 4, "Team B": 0}
    assert result.summary == "Stroke Play: Team A dominated with superior team scoring"


def test_singles_pair_players_by_seat(cup) -> None:
    result = play_cup_round(cup, "round-2", LOPSIDED)

    assert result.points_awarded == {"Team A": 2, "Team B": 0}
    assert result.summary == "Singles Matches: Team A 2 - 0 Team B"
    assert [r.final_status.winner for r in result.results] == ["p1", "p3"]


def test_halved_singles_share_points(cup) -> None:
    result = play_cup_round(cup, "round-2", EVEN)

    assert result.points_awarded == {"Team A": 1, "Team B": 1}
    assert result.summary == "Singles Matches: Team A 1 - 1 Team B"


def test_dots_and_snake_rounds(cup) -> None:
    dots = play_cup_round(cup, "round-3", LOPSIDED)
    snake = play_cup_round(cup, "round-4", LOPSIDED)

    assert dots.points_awarded == {"Team A": 4, "Team B": 0}
    assert dots.summary.startswith("Dots Championship: Team A")
    # Six on a par four estimates as four putts; the last three-putter holds.
    assert snake.results[0].final_snake_holder == "p4"
    assert snake.points_awarded == {"Team A": 2, "Team B": 0}


def test_level_rounds_split_points(cup) -> None:
    stroke = play_cup_round(cup, "round-1", EVEN)
    snake = play_cup_round(cup, "round-4", EVEN)

    assert stroke.points_awarded == {"Team A": 2, "Team B": 2}
    assert stroke.summary.startswith("Stroke Play: Teams tied")
    assert snake.results[0].final_snake_holder is None
    assert snake.points_awarded == {"Team A": 1, "Team B": 1}


def test_net_scoring_uses_player_handicaps() -> None:
    players = [
        CupPlayer(id="p1"),
        CupPlayer(id="p2", handicap=36),
        CupPlayer(id="p3"),
        CupPlayer(id="p4", handicap=36),
    ]
    cup = create_cup(players)

    result = play_cup_round(cup, "round-1", LOPSIDED)

    assert result.points_awarded == {"Team A": 2, "Team B": 2}


def test_unknown_and_completed_rounds_rejected(cup) -> None:
    with pytest.raises(GameValidationError, match="Round round-9 not found"):
        play_cup_round(cup, "round-9", LOPSIDED)

    played = record_cup_round(cup, play_cup_round(cup, "round-1", LOPSIDED))

    assert played.find_round("round-1").completed
    assert not cup.find_round("round-1").completed
    with pytest.raises(GameValidationError, match="already been completed"):
        play_cup_round(played, "round-1", LOPSIDED)


def test_results_before_any_round(cup) -> None:
    results = cup_results(cup, [])

    assert results.current_standings == {"Team A": 0, "Team B": 0}
    assert not results.is_complete
    assert results.winner is None
    assert results.mvp is None


def test_cup_decided_once_target_reached(cup) -> None:
    played = [play_cup_round(cup, "round-1", LOPSIDED), play_cup_round(cup, "round-2", LOPSIDED)]

    midway = cup_results(cup, played)

    assert midway.current_standings == {"Team A": 6, "Team B": 0}
    assert not midway.is_complete
    assert midway.winner is None

    played.append(play_cup_round(cup, "round-3", LOPSIDED))
    final = cup_results(cup, played)

    assert final.is_complete
    assert final.winner == "Team A"
    assert [(s.team, s.points, s.rounds_won) for s in final.leaderboard] == [
        ("Team A", 10, 3),
        ("Team B", 0, 0),
    ]
    assert final.mvp.player_id == "p1"
    assert final.mvp.name == "Player 1"
    assert final.mvp.points_contributed == 5.0


def test_cup_over_http(client) -> None:
    created = client.post(
        "/api/cup", json={"players": [p.model_dump() for p in PLAYERS], "totalPointsToWin": 4}
    )
    assert created.status_code == 200
    cup = created.json()
    assert cup["rounds"][0]["gameMode"] == "stroke"

    played = client.post("/api/cup/rounds/round-1", json={"cup": cup, "scores": LOPSIDED})
    assert played.status_code == 200
    assert played.json()["pointsAwarded"] == {"Team A": 4, "Team B": 0}

    results = client.post(
        "/api/cup/results", json={"cup": cup, "completedRounds": [played.json()]}
    )
    body = results.json()
    assert results.status_code == 200
    assert body["isComplete"] is True
    assert body["winner"] == "Team A"
    assert body["mvpPlayer"]["playerId"] == "p1"

    missing = client.post("/api/cup/rounds/round-7", json={"cup": cup, "scores": LOPSIDED})
    assert missing.status_code == 422
    too_few = client.post("/api/cup", json={"players": [{"id": "solo"}]})
    assert too_few.status_code == 422
