r"""Predicate decorator pausing a fixed delay between attempts."""

from __future__ import annotations

__all__ = ["WithWait"]

import logging
import time
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_delay
from aretry.predicates.base import BaseRetryPredicate

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class WithWait(BaseRetryPredicate):
    """Wrap a retry predicate to sleep a fixed delay before each retry.

    The pause happens only when the inner predicate allows the retry,
    so the delay is a minimum gap between two consecutive attempts.

    Args:
        predicate: The inner retry predicate.
        delay: The time to sleep in seconds before each retry.
            Must be >= 0.

    Raises:
        ValueError: If ``delay`` is negative.

    Example:
        ```pycon
        >>> from aretry import WithWait, limit
        >>> predicate = WithWait(limit(3), delay=0.01)
        >>> predicate(ValueError())
        True

        ```
    """

    def __init__(self, predicate: Callable[[Any], bool], delay: float) -> None:
        validate_delay(delay)
        self.predicate = predicate
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicate={self.predicate!r}, delay={self.delay})"

    def __call__(self, failure: Any) -> bool:
        if not self.predicate(failure):
            return False
        logger.debug(f"Waiting {self.delay:.2f}s before retry")
        time.sleep(self.delay)
        return True
