"""Shared fixtures for lobby integration tests."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pytest
from starlette.testclient import TestClient

from lobby.server.app import create_app
from lobby.server.settings import LobbyServerSettings
from pooling.session.registry import GameRegistry
from pooling.tests.helpers import FakeClock

if TYPE_CHECKING:
    from httpx import Response


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return GameRegistry(rng=random.Random(2024), clock=clock)


@pytest.fixture
def client(registry):
    app = create_app(settings=LobbyServerSettings(log_dir="", cors_origins=["http://localhost:3000"]), registry=registry)
    return TestClient(app)


def create_game(client: TestClient, max_players: int = 2) -> str:
    response = client.post("/api/game/create", json={"max_players": max_players})
    assert response.status_code == 200
    return response.json()["game_id"]


def join(client: TestClient, game_id: str, name: str) -> Response:
    return client.post("/api/game/join", json={"game_id": game_id, "player_name": name})


def submit(client: TestClient, game_id: str, player_id: str, asset_a: object, asset_b: object) -> Response:
    return client.post(
        "/api/game/submit",
        json={"game_id": game_id, "player_id": player_id, "asset_a": asset_a, "asset_b": asset_b},
    )
