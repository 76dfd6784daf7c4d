"""Repository pattern implementation for the player store.

Provides collection-like access to players. Rows are returned as detached
domain objects so the matching core can annotate them freely.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from matchmaker.core.decorators import store_error_handler

from .models import Player
from .orm_models import PlayerORM
from .transformers import player_domain_to_orm, player_orm_to_domain

logger = structlog.get_logger(__name__)


class PlayerRepositoryInterface(ABC):
    """Interface for player repository.

    Defines contract for data access operations.
    Enables mocking and potential swap of implementations.
    """

    @abstractmethod
    async def get_by_handle(self, handle: str) -> Optional[Player]:
        """Get player by handle.

        :param handle: Player's unique handle
        :returns: Player if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> Optional[list[Player]]:
        """Get every stored player.

        :returns: List of players (possibly empty), None if the list
            cannot be produced
        """
        pass

    @abstractmethod
    async def add_many(self, players: Iterable[Player]) -> int:
        """Add players whose handle is not stored yet.

        :param players: Players to add
        :returns: Number of players inserted
        """
        pass


class SQLAlchemyPlayerRepository(PlayerRepositoryInterface):
    """SQLAlchemy implementation of the player repository.

    Every call opens its own session, so reads may run concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @store_error_handler("PlayerRepository")
    async def get_by_handle(self, handle: str) -> Optional[Player]:
        async with self.session_factory() as session:
            stmt = (
                select(PlayerORM)
                .options(selectinload(PlayerORM.rankings))
                .where(PlayerORM.handle == handle)
            )
            result = await session.execute(stmt)
            player = result.scalar_one_or_none()

        if player is None:
            return None
        return player_orm_to_domain(player)

    @store_error_handler("PlayerRepository", reraise=False)
    async def get_all(self) -> Optional[list[Player]]:
        async with self.session_factory() as session:
            stmt = (
                select(PlayerORM)
                .options(selectinload(PlayerORM.rankings))
                .order_by(PlayerORM.handle)
            )
            result = await session.execute(stmt)
            players = result.scalars().all()

        return [player_orm_to_domain(player) for player in players]

    @store_error_handler("PlayerRepository")
    async def add_many(self, players: Iterable[Player]) -> int:
        async with self.session_factory() as session:
            result = await session.execute(select(PlayerORM.handle))
            known = set(result.scalars().all())

            new_rows = []
            for player in players:
                if player.handle in known:
                    continue
                known.add(player.handle)
                new_rows.append(player_domain_to_orm(player))

            session.add_all(new_rows)
            await session.commit()

        logger.info("Players added to store", inserted=len(new_rows))
        return len(new_rows)
