"""Tests for the ranking accessor."""

from matchmaker.features.matchmaking.rankings import (
    ensure_game_ranking,
    get_game_ranking,
    has_game_ranking,
)
from matchmaker.features.players.models import (
    UNRANKED,
    GameRanking,
    Player,
    Ranked,
)
from tests.factories import make_player


class TestGetGameRanking:
    def test_no_player_no_ranking(self):
        assert get_game_ranking(None, "UT99") is None

    def test_player_without_rankings(self):
        assert get_game_ranking(Player(handle="MISSE"), "UT99") is None

    def test_ranking_for_other_game_only(self):
        player = make_player("MISSE", game="USF4", total_score=300)

        assert get_game_ranking(player, "UT99") is None
        assert has_game_ranking(player, "UT99") is False

    def test_returns_matching_ranking(self):
        player = Player(
            handle="MISSE",
            rankings=[
                GameRanking(game="USF4", total_score=1200, rank=Ranked(4)),
                GameRanking(game="UT99", total_score=500, rank=UNRANKED),
            ],
        )

        ranking = get_game_ranking(player, "UT99")

        assert ranking.total_score == 500
        assert ranking.rank == UNRANKED

    def test_first_ranking_wins_on_duplicates(self):
        first = GameRanking(game="UT99", total_score=500, rank=Ranked(2))
        second = GameRanking(game="UT99", total_score=900, rank=Ranked(5))
        player = Player(handle="MISSE", rankings=[first, second])

        assert get_game_ranking(player, "UT99") is first

    def test_repeated_lookup_returns_same_reference(self):
        player = make_player("MISSE", total_score=500, rank=3)

        first = get_game_ranking(player, "UT99")
        second = get_game_ranking(player, "UT99")

        assert first is second
        assert first == GameRanking(game="UT99", total_score=500, rank=Ranked(3))


class TestEnsureGameRanking:
    def test_creates_beginner_ranking(self):
        player = Player(handle="MISSE")

        ranking = ensure_game_ranking(player, "UT99")

        assert ranking == GameRanking(game="UT99", total_score=0, rank=UNRANKED)
        assert player.rankings == [ranking]

    def test_keeps_existing_ranking(self):
        player = make_player("MISSE", total_score=750, rank=4)
        existing = player.rankings[0]

        assert ensure_game_ranking(player, "UT99") is existing
        assert len(player.rankings) == 1

    def test_does_not_append_twice(self):
        player = make_player("MISSE", game="USF4")

        first = ensure_game_ranking(player, "UT99")
        second = ensure_game_ranking(player, "UT99")

        assert first is second
        assert [r.game for r in player.rankings] == ["USF4", "UT99"]
