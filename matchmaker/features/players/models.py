"""Domain models for players and their per-game rankings.

These are plain in-memory objects mapped from ORM rows for the duration of
a single request. The matching core reads them and may annotate them
(default ranking, queue-entry time); nothing here is written back.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union

UNRANKED_LABEL = "unranked"


@dataclass(frozen=True)
class Unranked:
    """Rank category of a player without an established competitive tier."""

    def __str__(self) -> str:
        return UNRANKED_LABEL


@dataclass(frozen=True)
class Ranked:
    """Numeric competitive tier."""

    tier: int

    def __str__(self) -> str:
        return str(self.tier)


Rank = Union[Unranked, Ranked]

UNRANKED = Unranked()


def rank_from_value(value: Optional[Union[int, str]]) -> Rank:
    """Build a rank from its stored/serialized form.

    ``None`` and the ``"unranked"`` label map to ``UNRANKED``, integers (or
    integer strings) to ``Ranked``.
    """
    if value is None:
        return UNRANKED
    if isinstance(value, str):
        if value.strip().lower() == UNRANKED_LABEL:
            return UNRANKED
        return Ranked(tier=int(value))
    return Ranked(tier=int(value))


def rank_to_value(rank: Rank) -> Union[int, str]:
    """Inverse of ``rank_from_value`` for API payloads."""
    if isinstance(rank, Ranked):
        return rank.tier
    return UNRANKED_LABEL


@dataclass
class GameRanking:
    """A player's skill record for one game."""

    game: str
    total_score: float = 0
    rank: Rank = UNRANKED


@dataclass
class Player:
    """A player as seen by the matching core."""

    handle: str
    rankings: List[GameRanking] = field(default_factory=list)
    queued_from: Optional[datetime] = None
