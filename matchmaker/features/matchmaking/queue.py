"""Construction of the waiting-player queue for a match request."""

import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Optional

from matchmaker.features.players.models import Player

from .exceptions import EmptyQueueForGameError
from .rankings import has_game_ranking

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class QueueBuilder:
    """Derives the candidate pool from the full player list.

    The store carries no real queue telemetry, so players without a
    queue-entry time get a random one from earlier today. Clock and random
    source are injected to keep this reproducible under test.
    """

    def __init__(self, clock: Clock = utc_now, rng: Optional[random.Random] = None):
        self.clock = clock
        self.rng = rng or random.Random()

    def build_queue(
        self, all_players: Iterable[Player], requester: Player, game: str
    ) -> list[Player]:
        """Return every other player ranked in ``game``, with a queue-entry time.

        :raises EmptyQueueForGameError: if nobody else is ranked in the game
        """
        queue = [
            player
            for player in all_players
            if player.handle != requester.handle and has_game_ranking(player, game)
        ]

        if not queue:
            raise EmptyQueueForGameError(game)

        now = self.clock()
        for player in queue:
            if player.queued_from is None:
                player.queued_from = self.random_queue_entry(now)

        return queue

    def random_queue_entry(self, now: datetime) -> datetime:
        """Pick a moment between the start of ``now``'s day and ``now``."""
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
        elapsed = (now - start_of_day).total_seconds()
        return start_of_day + timedelta(seconds=self.rng.uniform(0, elapsed))
