"""Database connection and session management for PostgreSQL using SQLAlchemy with async support."""

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import get_global_settings


class DatabaseManager:
    """Database connection and session manager."""

    def __init__(self, database_url: str | None = None):
        """Initialize database manager with async engine."""
        settings = get_global_settings()
        self.database_url = database_url or settings.database_url

        # Create async engine with default connection pool settings
        self.engine = create_async_engine(
            self.database_url,
            echo=settings.debug,  # Enable SQL logging in debug mode
            future=True,
        )

        # Create async session factory
        self.async_session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()


# Global database manager instance
db_manager = DatabaseManager()


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """FastAPI dependency returning the shared session factory.

    Repositories that issue concurrent reads open one session per read.
    """
    return db_manager.async_session_factory
