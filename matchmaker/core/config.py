"""Configuration settings for the matchmaking service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class MatchmakingConfig:
    """Numeric knobs consumed by the matching core.

    Negative weights act as penalties: they are added, never subtracted.
    """

    max_match_retry: int = 5
    skill_difference_per_retry: float = 1000
    queue_time_weight: float = 2
    total_score_difference_weight: float = -1
    both_unranked_weight: float = 100
    both_ranked_weight: float = -1
    only_one_ranked_weight: float = -100


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    postgres_db: str = Field(default="matchmaker_db")
    postgres_user: str = Field(default="matchmaker_user")
    postgres_password: str = Field(default="dev_password")
    postgres_host: str = Field(default="postgres")
    postgres_port: int = Field(default=5432)

    @property
    def database_url(self) -> str:
        """Construct async database URL from components."""
        return f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # CORS Configuration
    cors_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    # Rate limiting
    rate_limit_enabled: bool = Field(default=True)
    matchmaking_rate_limit: str = Field(
        default="100/minute",
        description="slowapi limit string applied per client address",
    )

    # Seed data for the player store
    players_seed_path: str = Field(default="db/players.json")

    # Matchmaking Configuration
    max_match_retry: int = Field(
        default=5, ge=1, description="How many times the skill window is widened"
    )
    skill_difference_per_retry: float = Field(
        default=1000, gt=0, description="Skill window growth per attempt"
    )
    queue_time_weight: float = Field(default=2)
    total_score_difference_weight: float = Field(default=-1)
    both_unranked_weight: float = Field(default=100)
    both_ranked_weight: float = Field(default=-1)
    only_one_ranked_weight: float = Field(default=-100)

    @property
    def matchmaking_config(self) -> MatchmakingConfig:
        """Snapshot of the matchmaking knobs as an immutable value."""
        return MatchmakingConfig(
            max_match_retry=self.max_match_retry,
            skill_difference_per_retry=self.skill_difference_per_retry,
            queue_time_weight=self.queue_time_weight,
            total_score_difference_weight=self.total_score_difference_weight,
            both_unranked_weight=self.both_unranked_weight,
            both_ranked_weight=self.both_ranked_weight,
            only_one_ranked_weight=self.only_one_ranked_weight,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="forbid",  # Forbid extra fields for better type safety
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
