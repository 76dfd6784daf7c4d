"""SQLAlchemy 2.0 ORM models for the player store."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import (
    DateTime as SQLDateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from matchmaker.core.models import Base


class PlayerORM(Base):
    """Persisted player record."""

    __tablename__ = "players"

    handle: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Unique player handle (codename)",
    )

    queued_from: Mapped[Optional[datetime]] = mapped_column(
        SQLDateTime(timezone=True),
        nullable=True,
        comment="When the player started waiting for a match, if known",
    )

    created_at: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="When this player record was first created",
    )

    updated_at: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
        comment="When this player record was last updated",
    )

    # Insertion order decides which ranking wins for a duplicated game
    rankings: Mapped[List["GameRankingORM"]] = relationship(
        back_populates="player",
        cascade="all, delete-orphan",
        order_by="GameRankingORM.id",
    )

    def __repr__(self) -> str:
        return f"<PlayerORM(handle='{self.handle}', rankings={len(self.rankings)})>"


class GameRankingORM(Base):
    """Per-game ranking of a player."""

    __tablename__ = "game_rankings"
    __table_args__ = (Index("idx_game_rankings_handle_game", "handle", "game"),)

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Auto-incrementing primary key",
    )

    handle: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("players.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Reference to the player",
    )

    game: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        comment="Game identifier (e.g., UT99, USF4)",
    )

    total_score: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0,
        comment="Overall skill measure (MMR)",
    )

    rank: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Numeric rank tier, NULL when unranked",
    )

    player: Mapped[PlayerORM] = relationship(back_populates="rankings")

    def __repr__(self) -> str:
        return (
            f"<GameRankingORM(handle='{self.handle}', game='{self.game}', "
            f"total_score={self.total_score}, rank={self.rank})>"
        )
