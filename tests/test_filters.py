"""Tests for skill-window filtering and widening."""

from matchmaker.core.config import MatchmakingConfig
from matchmaker.features.matchmaking.filters import find_candidates, widen_search
from matchmaker.features.players.models import Player
from tests.factories import make_player


def handles(players):
    return [p.handle for p in players]


class TestFindCandidates:
    def test_threshold_is_inclusive(self):
        queue = [
            make_player("At Edge", total_score=1500),
            make_player("Just Outside", total_score=1501),
            make_player("Below", total_score=-500),
        ]

        candidates = find_candidates(queue, "UT99", 500, 1000)

        assert handles(candidates) == ["At Edge", "Below"]

    def test_skips_players_without_ranking(self):
        queue = [Player(handle="Newcomer"), make_player("Novice Bot", total_score=410)]

        assert handles(find_candidates(queue, "UT99", 500, 1000)) == ["Novice Bot"]

    def test_preserves_queue_order(self):
        queue = [
            make_player("C", total_score=600),
            make_player("A", total_score=400),
            make_player("B", total_score=500),
        ]

        assert handles(find_candidates(queue, "UT99", 500, 100)) == ["C", "A", "B"]


class TestWidenSearch:
    def test_first_attempt_hits(self, config):
        queue = [
            make_player("Novice Bot", total_score=410),
            make_player("Adept Bot", total_score=899),
        ]

        candidates = widen_search(queue, "UT99", 500, config)

        assert handles(candidates) == ["Novice Bot", "Adept Bot"]

    def test_stops_at_first_non_empty_window(self, config):
        queue = [
            make_player("Close", total_score=2000),  # gap 1500, attempt 2
            make_player("Far", total_score=3000),  # gap 2500, attempt 3
        ]

        assert handles(widen_search(queue, "UT99", 500, config)) == ["Close"]

    def test_last_attempt_reaches_step_times_retries(self, config):
        queue = [make_player("Edge", total_score=5500)]

        assert handles(widen_search(queue, "UT99", 500, config)) == ["Edge"]

    def test_gives_up_after_max_retries(self, config):
        queue = [
            make_player("Beyond", total_score=5501),
            make_player("Godlike Bot", total_score=99999999),
        ]

        assert widen_search(queue, "UT99", 500, config) == []

    def test_custom_step_and_retries(self):
        config = MatchmakingConfig(max_match_retry=2, skill_difference_per_retry=100)
        queue = [make_player("Gap 250", total_score=750)]

        assert widen_search(queue, "UT99", 500, config) == []

        config = MatchmakingConfig(max_match_retry=3, skill_difference_per_retry=100)
        assert handles(widen_search(queue, "UT99", 500, config)) == ["Gap 250"]
