"""Pydantic schemas for players: API responses and stored documents."""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import UNRANKED_LABEL


class GameRankingResponse(BaseModel):
    """Schema for a player's ranking in one game."""

    game: str = Field(..., description="Game identifier")
    total_score: float = Field(..., description="Overall skill measure")
    rank: Union[int, str] = Field(
        ..., description=f"Numeric rank tier or '{UNRANKED_LABEL}'"
    )


class PlayerResponse(BaseModel):
    """Schema for player response data."""

    handle: str = Field(..., description="Unique player handle")
    queued_from: Optional[datetime] = Field(
        None, description="When the player started waiting for a match"
    )
    rankings: List[GameRankingResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class GameRankingDocument(BaseModel):
    """Ranking entry as stored in a player seed document."""

    game: str = Field(..., min_length=1)
    total_score: float = Field(default=0, alias="totalScore")
    rank: Optional[Union[int, str]] = Field(default=None)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("rank")
    @classmethod
    def validate_rank(cls, v: Optional[Union[int, str]]) -> Optional[Union[int, str]]:
        """Accept integer tiers and the unranked label only."""
        if v is None or isinstance(v, int):
            return v
        if v.strip().lower() == UNRANKED_LABEL:
            return UNRANKED_LABEL
        try:
            return int(v)
        except ValueError:
            raise ValueError(
                f"rank must be an integer tier or '{UNRANKED_LABEL}', got {v!r}"
            )


class PlayerDocument(BaseModel):
    """Player document in the shape of the original JSON player store."""

    codename: str = Field(..., min_length=1)
    rankings: Optional[List[GameRankingDocument]] = Field(default=None)
    queued_from: Optional[datetime] = Field(default=None, alias="queuedFrom")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
