"""Skill-window filtering of the queue, widened step by step."""

from typing import Iterable

from matchmaker.core.config import MatchmakingConfig
from matchmaker.features.players.models import Player

from .rankings import get_game_ranking


def find_candidates(
    queue: Iterable[Player],
    game: str,
    requester_score: float,
    max_difference: float,
) -> list[Player]:
    """Players whose score is within ``max_difference`` of the requester's (inclusive)."""
    candidates = []
    for player in queue:
        ranking = get_game_ranking(player, game)
        if ranking is None:
            continue
        if abs(ranking.total_score - requester_score) <= max_difference:
            candidates.append(player)
    return candidates


def widen_search(
    queue: list[Player],
    game: str,
    requester_score: float,
    config: MatchmakingConfig,
) -> list[Player]:
    """Retry ``find_candidates`` with a growing window until someone fits.

    The window on attempt ``n`` is ``skill_difference_per_retry * n``; at most
    ``max_match_retry`` attempts are made. Returns an empty list when every
    attempt comes back empty.
    """
    for attempt in range(1, config.max_match_retry + 1):
        threshold = config.skill_difference_per_retry * attempt
        candidates = find_candidates(queue, game, requester_score, threshold)
        if candidates:
            return candidates
    return []
