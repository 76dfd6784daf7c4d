"""Matchmaking service: finds the best opponent for a waiting player.

The flow is:

- validate the request (handle and game are both required)
- fetch the requester and the full player list concurrently
- give the requester a beginner ranking for the game if they have none
- build the queue of other players ranked in the game
- widen the skill window until candidates appear, then pick the
  best-scoring one
"""

import asyncio
from typing import Optional

from matchmaker.core.config import MatchmakingConfig
from matchmaker.core.validation import is_empty_or_none
from matchmaker.features.players.models import GameRanking, Player
from matchmaker.features.players.repository import PlayerRepositoryInterface

from .exceptions import (
    GameRequiredError,
    NoMatchingPlayersFoundError,
    PlayerHandleRequiredError,
    PlayerListUnavailableError,
    PlayerNotFoundError,
)
from .filters import widen_search
from .queue import Clock, QueueBuilder, utc_now
from .rankings import ensure_game_ranking, get_game_ranking
from .scoring import MatchScorer, ScoredCandidate


class MatchmakingService:
    """Orchestrates a single match request. Holds no state between requests."""

    def __init__(
        self,
        repository: PlayerRepositoryInterface,
        config: MatchmakingConfig,
        queue_builder: Optional[QueueBuilder] = None,
        scorer: Optional[MatchScorer] = None,
        clock: Clock = utc_now,
    ):
        self.repository = repository
        self.config = config
        self.clock = clock
        self.queue_builder = queue_builder or QueueBuilder(clock=clock)
        self.scorer = scorer or MatchScorer(config)

    async def find_match(
        self, player_handle: Optional[str], game: Optional[str]
    ) -> Player:
        """Match the given player to a suitable opponent in ``game``.

        :raises PlayerHandleRequiredError: handle is empty
        :raises GameRequiredError: game is empty
        :raises PlayerNotFoundError: no stored player has that handle
        :raises PlayerListUnavailableError: the store could not list players
        :raises EmptyQueueForGameError: nobody else is ranked in the game
        :raises NoMatchingPlayersFoundError: nobody within the widest window
        """
        if is_empty_or_none(player_handle):
            raise PlayerHandleRequiredError(operation="find_match")
        if is_empty_or_none(game):
            raise GameRequiredError(operation="find_match")

        # The list does not depend on the requester lookup, fetch both at once
        requester, all_players = await asyncio.gather(
            self.repository.get_by_handle(player_handle),
            self.repository.get_all(),
        )

        if requester is None:
            raise PlayerNotFoundError(
                operation="find_match", context={"player_handle": player_handle}
            )
        ensure_game_ranking(requester, game)

        if all_players is None:
            raise PlayerListUnavailableError(operation="find_match")

        queue = self.queue_builder.build_queue(all_players, requester, game)
        return self.match(requester, game, queue)

    def match(self, requester: Player, game: str, queue: list[Player]) -> Player:
        """Find the best opponent for ``requester`` among ``queue``."""
        requester_ranking = ensure_game_ranking(requester, game)

        candidates = widen_search(
            queue, game, requester_ranking.total_score, self.config
        )
        if not candidates:
            raise NoMatchingPlayersFoundError(
                operation="match",
                context={
                    "game": game,
                    "queue_size": len(queue),
                    "max_difference": self.config.skill_difference_per_retry
                    * self.config.max_match_retry,
                },
            )

        if len(candidates) == 1:
            return candidates[0]

        return self.select_best_match(requester_ranking, game, candidates)

    def select_best_match(
        self, requester_ranking: GameRanking, game: str, candidates: list[Player]
    ) -> Player:
        """Return the candidate with the strictly highest score.

        Every candidate is scored against the same ``now``; on equal scores
        the earlier candidate is kept.
        """
        now = self.clock()
        best: Optional[ScoredCandidate] = None

        for candidate in candidates:
            candidate_ranking = get_game_ranking(candidate, game)
            if candidate_ranking is None:
                continue
            scored = ScoredCandidate(
                player=candidate,
                score=self.scorer.score(
                    requester_ranking, candidate, candidate_ranking, now
                ),
            )
            if best is None or scored.score > best.score:
                best = scored

        if best is None:
            raise NoMatchingPlayersFoundError(operation="select_best_match")
        return best.player
