"""Shared fixtures for the matchmaking test suite."""

import random
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from matchmaker.core.config import MatchmakingConfig
from matchmaker.features.matchmaking.queue import QueueBuilder
from matchmaker.features.players.repository import PlayerRepositoryInterface


@pytest.fixture
def fixed_now():
    """A fixed 'now' in the afternoon so earlier-today timestamps exist."""
    return datetime(2024, 5, 17, 15, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def config():
    """Default matchmaking knobs."""
    return MatchmakingConfig()


@pytest.fixture
def queue_builder(clock):
    return QueueBuilder(clock=clock, rng=random.Random(1234))


@pytest.fixture
def mock_repository():
    """Player store double."""
    return AsyncMock(spec=PlayerRepositoryInterface)
