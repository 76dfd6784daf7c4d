"""Failure kinds raised by the matchmaking service."""

from typing import Any, Dict, Optional

from matchmaker.core.exceptions import ServiceException


class MatchmakingError(ServiceException):
    """Base exception for matchmaking failures."""

    code = "matchmaking_error"
    default_message = "Matchmaking failed"

    def __init__(
        self,
        message: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message or self.default_message,
            service="MatchmakingService",
            operation=operation,
            context=context,
        )


class PlayerHandleRequiredError(MatchmakingError):
    code = "player_handle_required"
    default_message = "Player handle is required to perform matching"


class GameRequiredError(MatchmakingError):
    code = "game_required"
    default_message = "Game is required to perform matching"


class PlayerNotFoundError(MatchmakingError):
    code = "player_with_handle_not_found"
    default_message = "Player with provided handle not found"


class PlayerListUnavailableError(MatchmakingError):
    code = "all_players_list_empty"
    default_message = "The list of all players could not be loaded"


class EmptyQueueForGameError(MatchmakingError):
    """No eligible opponents exist for the game at all."""

    code = "no_players_in_queue_for_game"
    default_message = "No players currently in queue for game"

    def __init__(self, game: str, operation: Optional[str] = "build_queue"):
        super().__init__(
            message=f"{self.default_message}: {game}",
            operation=operation,
            context={"game": game},
        )


class NoMatchingPlayersFoundError(MatchmakingError):
    """Opponents exist but none fell inside the widest skill window."""

    code = "no_matching_players_found"
    default_message = "No matching players found, please try again later"
