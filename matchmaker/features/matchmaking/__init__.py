"""Matchmaking feature: opponent search, scoring and the HTTP endpoint."""

from .exceptions import (
    EmptyQueueForGameError,
    GameRequiredError,
    MatchmakingError,
    NoMatchingPlayersFoundError,
    PlayerHandleRequiredError,
    PlayerListUnavailableError,
    PlayerNotFoundError,
)
from .queue import QueueBuilder
from .scoring import MatchScorer, ScoredCandidate
from .service import MatchmakingService

__all__ = [
    "EmptyQueueForGameError",
    "GameRequiredError",
    "MatchmakingError",
    "NoMatchingPlayersFoundError",
    "PlayerHandleRequiredError",
    "PlayerListUnavailableError",
    "PlayerNotFoundError",
    "QueueBuilder",
    "MatchScorer",
    "ScoredCandidate",
    "MatchmakingService",
]
