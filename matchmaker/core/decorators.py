"""
Decorators for cross-cutting concerns in the data access layer.

Repository methods are wrapped so database failures are logged with
structured context and surfaced as ``DatabaseError`` (or swallowed into a
``None`` result when the caller treats absence as its own failure kind).
"""

import functools
import inspect
from typing import Any, Awaitable, Callable, Dict, Optional, ParamSpec, TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError

from matchmaker.core.exceptions import DatabaseError, ServiceException

logger = structlog.get_logger(__name__)

# Type variables for generic decorator typing
P = ParamSpec("P")
R = TypeVar("R")

_EXCLUDED_ARGUMENTS = ("self", "db", "session", "session_factory")


def _build_context(
    func: Callable[..., Any],
    store_name: str,
    args: tuple,
    kwargs: dict,
) -> Dict[str, Any]:
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()

    context: Dict[str, Any] = {"store": store_name, "operation": func.__name__}
    for name, value in bound_args.arguments.items():
        if name in _EXCLUDED_ARGUMENTS:
            continue
        # Limit values to avoid huge log entries
        context[name] = str(value)[:200] if value is not None else None
    return context


def store_error_handler(
    store_name: str,
    reraise: bool = True,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[Optional[R]]]]:
    """
    Decorator for handling repository errors with structured logging.

    :param store_name: Name of the store (e.g., "PlayerRepository")
    :param reraise: Re-raise failures as ``DatabaseError`` when True,
        return ``None`` when False
    :returns: Decorated coroutine function

    :example:
        @store_error_handler("PlayerRepository", reraise=False)
        async def get_all(self) -> Optional[list[Player]]:
            ...
    """

    def decorator(
        func: Callable[P, Awaitable[R]],
    ) -> Callable[P, Awaitable[Optional[R]]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Optional[R]:
            context = _build_context(func, store_name, args, kwargs)

            try:
                logger.debug("Store method called", **context)
                result = await func(*args, **kwargs)
                logger.debug("Store method completed successfully", **context)
                return result

            except ServiceException as e:
                logger.error(
                    "Store operation failed",
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                    **context,
                )
                if reraise:
                    raise
                return None

            except (SQLAlchemyError, ConnectionError, TimeoutError, OSError) as e:
                logger.error(
                    "Database error in store operation",
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                    **context,
                )
                if reraise:
                    raise DatabaseError(
                        message=str(e),
                        service=store_name,
                        operation=context["operation"],
                        context=context,
                        original_error=e,
                    ) from e
                return None

        return wrapper

    return decorator
