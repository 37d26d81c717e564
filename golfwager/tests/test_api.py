from golfwager.config import reset_settings_cache


def _round_payload(sample_round, players=None):
    payload = sample_round.model_dump(mode="json")
    if players is not None:
        payload["players"] = players
    return payload


def test_health(client) -> None:
    r = client.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert "skins" in body["modes"]
    assert body["limits"]["maxPlayers"] == 16


def test_list_modes(client) -> None:
    r = client.get("/api/games/modes")

    assert r.status_code == 200
    assert {"mode": "stroke-play", "name": "Stroke Play"} in r.json()
    assert len(r.json()) == 8


def test_compute_stroke_play(client, sample_round) -> None:
    r = client.post(
        "/api/games/compute",
        json={"round": _round_payload(sample_round), "game": {"mode": "stroke-play", "useNet": True}},
    )

    assert r.status_code == 200
    body = r.json()
    assert body["mode"] == "stroke-play"
    assert body["totals"]["alice"] == {"gross": 73, "net": 69}
    assert body["leaderboard"][0]["playerId"] == "charlie"
    assert body["leaderboard"][0]["scoreType"] == "net"


def test_compute_accepts_camel_case_round(client) -> None:
    r = client.post(
        "/api/games/compute",
        json={
            "roundData": {
                "players": ["a", "b"],
                "strokes": {"a": {"1": 3}, "b": {"1": 4}},
                "holeDetails": {"a": {"1": {"putts": 1, "fairwayHit": True}}},
            },
            "game": {"mode": "dots", "wagerPerDot": 10},
        },
    )

    assert r.status_code == 200
    ledger = r.json()["ledger"]
    assert ledger == [{"from": "b", "to": "a", "amount": 40, "memo": "Dots difference: 4"}]


def test_compute_rejects_invalid_game(client, sample_round) -> None:
    r = client.post(
        "/api/games/compute",
        json={"round": _round_payload(sample_round), "game": {"mode": "match-play"}},
    )

    assert r.status_code == 422
    assert r.json()["detail"] == "Match play requires exactly 2 players"


def test_round_limits(client, sample_round, monkeypatch) -> None:
    monkeypatch.setenv("GOLFWAGER_MAX_PLAYERS", "2")
    reset_settings_cache()

    r = client.post(
        "/api/games/compute",
        json={"round": _round_payload(sample_round), "game": {"mode": "skins"}},
    )

    assert r.status_code == 413


def test_net_endpoint(client) -> None:
    r = client.post(
        "/api/settlement/net",
        json={
            "payables": [
                {"from": "a", "to": "b", "amount": 100},
                {"from": "b", "to": "c", "amount": 100},
            ]
        },
    )

    assert r.status_code == 200
    body = r.json()
    assert body["balances"] == {"a": -100, "b": 0, "c": 100}
    assert body["transfers"] == [
        {"from": "a", "to": "c", "amount": 100, "memo": "Net settlement"}
    ]


def test_settle_round_endpoint(client, sample_round) -> None:
    r = client.post(
        "/api/settlement/round",
        json={
            "round": _round_payload(sample_round),
            "games": [{"mode": "nassau", "unitSats": 100}, {"mode": "stroke-play"}],
            "expenses": [
                {"id": "fees", "amountSats": 600, "paidBy": "alice",
                 "splitBetween": ["alice", "bob", "charlie"]}
            ],
        },
    )

    assert r.status_code == 200
    body = r.json()
    assert set(body["results"]) == {"nassau", "stroke-play"}
    assert body["balances"] == {"alice": 100, "charlie": 400, "bob": -500}
    assert sum(t["amount"] for t in body["transfers"]) == 500


def test_handicap_pops_endpoint(client, sample_course) -> None:
    r = client.post(
        "/api/handicap/pops",
        json={"handicap": 10, "course": sample_course.model_dump(mode="json")},
    )

    assert r.status_code == 200
    pops = r.json()
    assert pops["13"] == 1
    assert pops["15"] == 0
    assert sum(pops.values()) == 10


def test_handicap_index_endpoint(client) -> None:
    rounds = [{"roundId": f"r{i}", "gross": gross} for i, gross in enumerate([88, 80, 86, 82, 84])]

    r = client.post("/api/handicap/index", json={"rounds": rounds, "slope": 130})

    assert r.status_code == 200
    body = r.json()
    assert body["index"] == 8.6
    assert body["method"] == "best-2-of-5"
    assert body["courseHandicap"] == 10


def test_api_key_required_when_enabled(client, monkeypatch) -> None:
    monkeypatch.setenv("REQUIRE_API_KEY", "1")
    monkeypatch.setenv("API_KEY", "secret")
    reset_settings_cache()

    assert client.get("/api/games/modes").status_code == 401
    assert client.get("/api/games/modes", headers={"x-api-key": "nope"}).status_code == 401
    assert client.get("/api/games/modes", headers={"x-api-key": "secret"}).status_code == 200
    assert client.get("/health").status_code == 200


def test_metrics_endpoint(client) -> None:
    client.get("/health")

    r = client.get("/metrics")

    assert r.status_code == 200
    assert "requests_total" in r.text


def test_metrics_label_routes_and_time_games(client, sample_round) -> None:
    client.post(
        "/api/games/compute",
        json={"round": _round_payload(sample_round), "game": {"mode": "stroke-play"}},
    )
    client.get("/no/such/route")

    text = client.get("/metrics").text

    assert 'games_compute_seconds_count{mode="stroke-play"}' in text
    assert 'path="/api/games/compute"' in text
    assert 'path="unmatched"' in text
    assert 'path="/no/such/route"' not in text
