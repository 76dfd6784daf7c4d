"""Transformers for converting between layers in players feature.

This module provides transformation functions for:
- ORM models → domain models (per-request working copies)
- domain models → Pydantic schemas (API responses)
- seed documents → ORM models

Following the Data Mapper pattern to keep layers decoupled.
"""

from datetime import datetime, timezone
from typing import Optional

from .models import GameRanking, Player, Ranked, rank_from_value, rank_to_value
from .orm_models import GameRankingORM, PlayerORM
from .schemas import GameRankingResponse, PlayerDocument, PlayerResponse


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read naive timestamps as UTC so wait times can be subtracted."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def player_orm_to_domain(player: PlayerORM) -> Player:
    """Build a detached domain player from its ORM row.

    The result shares no state with the session, so in-memory annotations
    made while matching never reach the database.
    """
    return Player(
        handle=player.handle,
        queued_from=as_utc(player.queued_from),
        rankings=[
            GameRanking(
                game=ranking.game,
                total_score=ranking.total_score,
                rank=rank_from_value(ranking.rank),
            )
            for ranking in player.rankings
        ],
    )


def player_to_response(player: Player) -> PlayerResponse:
    """Transform a domain player to the API response schema."""
    return PlayerResponse(
        handle=player.handle,
        queued_from=player.queued_from,
        rankings=[
            GameRankingResponse(
                game=ranking.game,
                total_score=ranking.total_score,
                rank=rank_to_value(ranking.rank),
            )
            for ranking in player.rankings
        ],
    )


def document_to_domain(document: PlayerDocument) -> Player:
    """Transform a validated seed document to a domain player."""
    return Player(
        handle=document.codename,
        queued_from=as_utc(document.queued_from),
        rankings=[
            GameRanking(
                game=ranking.game,
                total_score=ranking.total_score,
                rank=rank_from_value(ranking.rank),
            )
            for ranking in document.rankings or []
        ],
    )


def player_domain_to_orm(player: Player) -> PlayerORM:
    """Transform a domain player to a new ORM row with its rankings."""
    return PlayerORM(
        handle=player.handle,
        queued_from=player.queued_from,
        rankings=[
            GameRankingORM(
                game=ranking.game,
                total_score=ranking.total_score,
                rank=ranking.rank.tier if isinstance(ranking.rank, Ranked) else None,
            )
            for ranking in player.rankings
        ],
    )
