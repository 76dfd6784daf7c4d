"""HTTP tests for the matchmaking endpoint."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from matchmaker.core.exceptions import DatabaseError
from matchmaker.features.matchmaking.dependencies import get_matchmaking_service
from matchmaker.features.matchmaking.exceptions import (
    EmptyQueueForGameError,
    NoMatchingPlayersFoundError,
    PlayerListUnavailableError,
    PlayerNotFoundError,
)
from matchmaker.features.players.dependencies import get_player_repository
from matchmaker.main import app
from tests.factories import make_player


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_service():
    service = AsyncMock()
    app.dependency_overrides[get_matchmaking_service] = lambda: service
    return service


class TestFindMatchEndpoint:
    def test_returns_matched_player(self, client, mock_service):
        queued_from = datetime(2024, 5, 17, 9, 0, tzinfo=timezone.utc)
        mock_service.find_match.return_value = make_player(
            "Adept Bot", total_score=899, rank=4, queued_from=queued_from
        )

        response = client.get("/api/v1/matchmaker/MISSE", params={"game": "UT99"})

        assert response.status_code == 200
        body = response.json()
        assert body["handle"] == "Adept Bot"
        assert body["rankings"] == [{"game": "UT99", "total_score": 899.0, "rank": 4}]
        assert body["queued_from"].startswith("2024-05-17T09:00:00")
        mock_service.find_match.assert_awaited_once_with("MISSE", "UT99")

    def test_unranked_opponent_serialized_as_label(self, client, mock_service):
        mock_service.find_match.return_value = make_player("Novice Bot", total_score=410)

        response = client.get("/api/v1/matchmaker/MISSE?game=UT99")

        assert response.status_code == 200
        assert response.json()["rankings"][0]["rank"] == "unranked"

    def test_legacy_route(self, client, mock_service):
        mock_service.find_match.return_value = make_player("Novice Bot", total_score=410)

        response = client.get("/matchmaker/MISSE?game=UT99")

        assert response.status_code == 200
        assert response.json()["handle"] == "Novice Bot"

    @pytest.mark.parametrize(
        "error",
        [EmptyQueueForGameError("UT99"), NoMatchingPlayersFoundError()],
    )
    def test_no_opponent_is_no_content(self, client, mock_service, error):
        mock_service.find_match.side_effect = error

        response = client.get("/api/v1/matchmaker/MISSE?game=UT99")

        assert response.status_code == 204
        assert response.content == b""

    @pytest.mark.parametrize(
        "error, detail",
        [
            (PlayerNotFoundError(), "Player with provided handle not found"),
            (
                PlayerListUnavailableError(),
                "The list of all players could not be loaded",
            ),
        ],
    )
    def test_bad_request_errors(self, client, mock_service, error, detail):
        mock_service.find_match.side_effect = error

        response = client.get("/api/v1/matchmaker/hankey?game=UT99")

        assert response.status_code == 400
        assert response.json() == {"detail": detail}

    @pytest.mark.parametrize(
        "error", [RuntimeError("boom"), DatabaseError("connection refused")]
    )
    def test_unexpected_error_is_generic_500(self, client, mock_service, error):
        mock_service.find_match.side_effect = error

        response = client.get("/api/v1/matchmaker/MISSE?game=UT99")

        assert response.status_code == 500
        assert response.json() == {"detail": "Oops, something went wrong"}


class TestRequestValidation:
    @pytest.fixture
    def repository(self):
        repository = AsyncMock()
        app.dependency_overrides[get_player_repository] = lambda: repository
        return repository

    def test_missing_game(self, client, repository):
        response = client.get("/api/v1/matchmaker/MISSE")

        assert response.status_code == 400
        assert response.json() == {"detail": "Game is required to perform matching"}
        repository.get_by_handle.assert_not_called()

    def test_blank_game(self, client, repository):
        response = client.get("/api/v1/matchmaker/MISSE?game=")

        assert response.status_code == 400
        assert response.json() == {"detail": "Game is required to perform matching"}

    def test_blank_handle(self, client, repository):
        response = client.get("/api/v1/matchmaker/%20?game=UT99")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Player handle is required to perform matching"
        }

    def test_unknown_player(self, client, repository):
        repository.get_by_handle.return_value = None
        repository.get_all.return_value = [make_player("Novice Bot")]

        response = client.get("/api/v1/matchmaker/hankey?game=UT99")

        assert response.status_code == 400
        assert response.json() == {"detail": "Player with provided handle not found"}

    def test_end_to_end_match(self, client, repository):
        requester = make_player("MISSE", total_score=500)
        repository.get_by_handle.return_value = requester
        repository.get_all.return_value = [
            requester,
            make_player("Godlike Bot", total_score=99999999),
            make_player("Novice Bot", total_score=410),
        ]

        response = client.get("/api/v1/matchmaker/MISSE?game=UT99")

        assert response.status_code == 200
        assert response.json()["handle"] == "Novice Bot"
        assert response.json()["queued_from"] is not None


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "version" in response.json()


def test_request_id_and_timing_headers(client):
    response = client.get("/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"
    assert response.headers["X-Response-Time"].endswith("s")
