"""Session decorators for gateway operations.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

from readycash.common.exceptions import SessionRejected

logger = logging.getLogger(__name__)


def retry_on_session_rejected(
    authenticator_attr: str = "authenticator",
    max_retries: int = 1,
) -> Callable:
    """Decorator that re-runs a method after the gateway rejects its session.

    On SessionRejected the authenticator found at ``self.<authenticator_attr>``
    is invalidated and the whole method runs again, at most ``max_retries``
    times. The last rejection propagates to the caller.

    Args:
        authenticator_attr: Attribute name of the authenticator on self
        max_retries: Maximum number of re-runs after a rejection

    Returns:
        Decorated method with bounded retry logic
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            authenticator = getattr(self, authenticator_attr)
            attempt = 0
            while True:
                try:
                    return func(self, *args, **kwargs)
                except SessionRejected:
                    if attempt >= max_retries:
                        logger.error(
                            "%s: session rejected after %d retries",
                            func.__name__,
                            attempt,
                        )
                        raise
                    attempt += 1
                    logger.info(
                        "%s: session rejected, re-authenticating (retry %d of %d)",
                        func.__name__,
                        attempt,
                        max_retries,
                    )
                    authenticator.invalidate()

        return wrapper

    return decorator
