"""Shared pytest fixtures for golfwager tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from golfwager.app import app
from golfwager.config import reset_settings_cache
from golfwager.games.schemas import CoreRoundData, Course
from golfwager.handicap import build_round_data
from golfwager.telemetry import set_settlement_telemetry_emitter

from .factories import SAMPLE_HANDICAPS, SAMPLE_SCORES, make_course


@pytest.fixture
def sample_course() -> Course:
    return make_course()


@pytest.fixture
def sample_round(sample_course: Course) -> CoreRoundData:
    return build_round_data(SAMPLE_SCORES, SAMPLE_HANDICAPS, sample_course)


@pytest.fixture(autouse=True)
def _fresh_state():
    reset_settings_cache()
    yield
    reset_settings_cache()
    set_settlement_telemetry_emitter(None)


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client
