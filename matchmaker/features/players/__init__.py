"""Players feature: the player store and player domain models."""

from .models import (
    UNRANKED,
    GameRanking,
    Player,
    Rank,
    Ranked,
    Unranked,
    rank_from_value,
    rank_to_value,
)
from .repository import PlayerRepositoryInterface, SQLAlchemyPlayerRepository

__all__ = [
    "UNRANKED",
    "GameRanking",
    "Player",
    "Rank",
    "Ranked",
    "Unranked",
    "rank_from_value",
    "rank_to_value",
    "PlayerRepositoryInterface",
    "SQLAlchemyPlayerRepository",
]
