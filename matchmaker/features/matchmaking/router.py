"""Matchmaking API endpoint."""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from matchmaker.core import get_global_settings
from matchmaker.core.rate_limiter import limiter
from matchmaker.features.players.schemas import PlayerResponse
from matchmaker.features.players.transformers import player_to_response

from .dependencies import MatchmakingServiceDep
from .exceptions import (
    EmptyQueueForGameError,
    GameRequiredError,
    NoMatchingPlayersFoundError,
    PlayerHandleRequiredError,
    PlayerListUnavailableError,
    PlayerNotFoundError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/matchmaker", tags=["matchmaking"])

BAD_REQUEST_ERRORS = (
    PlayerHandleRequiredError,
    GameRequiredError,
    PlayerNotFoundError,
    PlayerListUnavailableError,
)
NO_CONTENT_ERRORS = (EmptyQueueForGameError, NoMatchingPlayersFoundError)


@router.get(
    "/{player_handle}",
    response_model=PlayerResponse,
    responses={
        status.HTTP_204_NO_CONTENT: {"description": "No suitable opponent right now"},
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid request or unknown player"},
    },
)
@limiter.limit(get_global_settings().matchmaking_rate_limit)
async def find_match(
    request: Request,
    player_handle: str,
    service: MatchmakingServiceDep,
    game: Optional[str] = Query(None, description="Game to find an opponent in"),
):
    """
    Find the best opponent for a player in the given game.

    Returns the matched player, 204 when no opponent can be found at the
    moment, or 400 when the request or the player is invalid.
    """
    try:
        player = await service.find_match(player_handle, game)
    except NO_CONTENT_ERRORS as e:
        logger.info(
            "No opponent found",
            player_handle=player_handle,
            game=game,
            reason=e.code,
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except BAD_REQUEST_ERRORS as e:
        logger.warning(
            "Rejected matchmaking request",
            player_handle=player_handle,
            game=game,
            reason=e.code,
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(
            "Matchmaking failed",
            player_handle=player_handle,
            game=game,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Oops, something went wrong",
        )

    logger.info(
        "Match found",
        player_handle=player_handle,
        game=game,
        opponent=player.handle,
    )
    return player_to_response(player)
