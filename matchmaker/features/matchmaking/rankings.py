"""Lookup of a player's ranking for a given game."""

from typing import Optional

from matchmaker.features.players.models import UNRANKED, GameRanking, Player


def get_game_ranking(player: Optional[Player], game: str) -> Optional[GameRanking]:
    """Return the player's ranking for ``game``, or None.

    When several rankings exist for the same game the first one wins.
    """
    if player is None:
        return None

    for ranking in player.rankings:
        if ranking.game == game:
            return ranking
    return None


def has_game_ranking(player: Player, game: str) -> bool:
    return get_game_ranking(player, game) is not None


def ensure_game_ranking(player: Player, game: str) -> GameRanking:
    """Return the player's ranking for ``game``, creating a beginner one if missing.

    The synthesized ranking (score 0, unranked) is appended to the in-memory
    player only.
    """
    ranking = get_game_ranking(player, game)
    if ranking is None:
        ranking = GameRanking(game=game, total_score=0, rank=UNRANKED)
        player.rankings.append(ranking)
    return ranking
