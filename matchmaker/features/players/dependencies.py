"""Dependencies for the players feature."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from matchmaker.core import get_session_factory

from .repository import PlayerRepositoryInterface, SQLAlchemyPlayerRepository


async def get_player_repository(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> PlayerRepositoryInterface:
    """Get player repository instance.

    :param session_factory: Session factory used to open one session per read
    :returns: Player repository implementation
    """
    return SQLAlchemyPlayerRepository(session_factory)


# Type aliases for cleaner dependency injection
PlayerRepositoryDep = Annotated[
    PlayerRepositoryInterface, Depends(get_player_repository)
]

__all__ = ["get_player_repository", "PlayerRepositoryDep"]
