"""Dependencies for the matchmaking feature."""

from typing import Annotated

from fastapi import Depends

from matchmaker.core import MatchmakingConfig, get_global_settings
from matchmaker.features.players.dependencies import PlayerRepositoryDep

from .service import MatchmakingService


def get_matchmaking_config() -> MatchmakingConfig:
    """Get the matchmaking knobs from application settings."""
    return get_global_settings().matchmaking_config


MatchmakingConfigDep = Annotated[MatchmakingConfig, Depends(get_matchmaking_config)]


def get_matchmaking_service(
    repository: PlayerRepositoryDep, config: MatchmakingConfigDep
) -> MatchmakingService:
    """Get matchmaking service instance.

    :param repository: Player repository
    :param config: Matchmaking weights and retry knobs
    :returns: Matchmaking service with injected dependencies
    """
    return MatchmakingService(repository, config)


MatchmakingServiceDep = Annotated[
    MatchmakingService, Depends(get_matchmaking_service)
]

__all__ = [
    "get_matchmaking_config",
    "get_matchmaking_service",
    "MatchmakingConfigDep",
    "MatchmakingServiceDep",
]
