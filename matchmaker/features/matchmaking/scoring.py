"""Desirability scoring of a potential opponent.

The score combines three weighted terms:

- time the opponent has spent in the queue (longer waits rank higher)
- absolute difference in total score (MMR)
- rank parity: a flat bonus when both players are unranked, a flat penalty
  when exactly one of them is, and a per-tier term when both are ranked

Penalties are expressed as negative weights and added like every other term.
"""

from dataclasses import dataclass
from datetime import datetime

from matchmaker.core.config import MatchmakingConfig
from matchmaker.features.players.models import GameRanking, Player, Rank, Ranked, Unranked


@dataclass(frozen=True)
class ScoredCandidate:
    player: Player
    score: float


class MatchScorer:
    """Scores candidates against the requester under configurable weights."""

    def __init__(self, config: MatchmakingConfig):
        self.config = config

    def score(
        self,
        requester_ranking: GameRanking,
        candidate: Player,
        candidate_ranking: GameRanking,
        now: datetime,
    ) -> float:
        """Compute the matchmaking score of ``candidate``.

        :param requester_ranking: Requester's ranking in the game
        :param candidate: The potential opponent
        :param candidate_ranking: Opponent's ranking in the same game
        :param now: Reference time shared by every candidate of a batch
        :returns: The score; higher is a better match
        """
        return (
            self.queue_time_term(candidate, now)
            + self.total_score_term(requester_ranking, candidate_ranking)
            + self.rank_term(requester_ranking.rank, candidate_ranking.rank)
        )

    def queue_time_term(self, candidate: Player, now: datetime) -> float:
        if candidate.queued_from is None:
            return 0.0
        waited = (now - candidate.queued_from).total_seconds()
        return waited * self.config.queue_time_weight

    def total_score_term(
        self, requester_ranking: GameRanking, candidate_ranking: GameRanking
    ) -> float:
        difference = abs(requester_ranking.total_score - candidate_ranking.total_score)
        return difference * self.config.total_score_difference_weight

    def rank_term(self, requester_rank: Rank, candidate_rank: Rank) -> float:
        if isinstance(requester_rank, Unranked) and isinstance(candidate_rank, Unranked):
            return self.config.both_unranked_weight
        if isinstance(requester_rank, Ranked) and isinstance(candidate_rank, Ranked):
            return (
                abs(requester_rank.tier - candidate_rank.tier)
                * self.config.both_ranked_weight
            )
        return self.config.only_one_ranked_weight
