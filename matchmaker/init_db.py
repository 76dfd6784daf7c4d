"""Database initialization and player seeding.

Creates all tables defined in the ORM models and loads players from a JSON
seed file: an array of documents shaped like

    {"codename": "MISSE", "queuedFrom": "...",
     "rankings": [{"game": "UT99", "totalScore": 500, "rank": 3}]}

where ``rank`` is an integer tier or ``"unranked"``.

Usage: ``python -m matchmaker.init_db [seed_path]``
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional, Union

import structlog
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from matchmaker.core import Base, SeedDataError, db_manager, get_global_settings
from matchmaker.core.database import DatabaseManager
from matchmaker.core.logging import setup_logging
from matchmaker.features.players import orm_models  # noqa: F401  (registers tables)
from matchmaker.features.players.models import Player
from matchmaker.features.players.repository import (
    PlayerRepositoryInterface,
    SQLAlchemyPlayerRepository,
)
from matchmaker.features.players.schemas import PlayerDocument
from matchmaker.features.players.transformers import document_to_domain

logger = structlog.get_logger(__name__)


def parse_player_document(document: Any, index: int = 0) -> Player:
    """Validate one seed document and convert it to a domain player.

    :raises SeedDataError: if the document is malformed
    """
    try:
        return document_to_domain(PlayerDocument.model_validate(document))
    except ValidationError as e:
        raise SeedDataError(
            f"invalid player document at index {index}",
            context={"index": index, "errors": e.errors()},
            original_error=e,
        ) from e


def load_player_documents(path: Union[str, Path]) -> list[Player]:
    """Read and validate every player in a JSON seed file.

    :raises SeedDataError: if the file is unreadable, not a JSON array, or
        contains an invalid document
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SeedDataError(
            f"cannot read {path}", context={"path": str(path)}, original_error=e
        ) from e

    if not isinstance(raw, list):
        raise SeedDataError(
            "seed file must contain a JSON array of players",
            context={"path": str(path), "got_type": type(raw).__name__},
        )

    return [parse_player_document(document, index) for index, document in enumerate(raw)]


async def create_tables(manager: DatabaseManager = db_manager) -> None:
    """Create all tables defined in the ORM models."""
    try:
        async with manager.engine.begin() as conn:
            logger.info("Creating database tables...")
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        logger.error(
            "Database initialization failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise

    logger.info(
        "Database tables ready",
        table_names=list(Base.metadata.tables.keys()),
    )


async def seed_players(
    repository: PlayerRepositoryInterface, players: list[Player]
) -> int:
    """Store the given players, skipping handles that already exist."""
    inserted = await repository.add_many(players)
    logger.info(
        "Player seeding completed",
        players_in_file=len(players),
        inserted=inserted,
        skipped=len(players) - inserted,
    )
    return inserted


async def init_db(seed_path: Optional[str] = None) -> None:
    """Create tables and seed players from ``seed_path`` when it exists."""
    settings = get_global_settings()
    path = Path(seed_path or settings.players_seed_path)

    await create_tables(db_manager)

    try:
        if path.exists():
            players = load_player_documents(path)
            repository = SQLAlchemyPlayerRepository(db_manager.async_session_factory)
            await seed_players(repository, players)
        else:
            logger.warning("No player seed file found", path=str(path))
    finally:
        await db_manager.close()


if __name__ == "__main__":
    setup_logging(get_global_settings().log_level)
    try:
        asyncio.run(init_db(sys.argv[1] if len(sys.argv) > 1 else None))
    except (SeedDataError, SQLAlchemyError) as e:
        logger.error("Initialization aborted", error=str(e))
        sys.exit(1)
