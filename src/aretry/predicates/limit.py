r"""Predicate decorator bounding the number of attempts."""

from __future__ import annotations

__all__ = ["WithLimit", "limit"]

import logging
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_limit
from aretry.predicates.base import BaseRetryPredicate, always

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class WithLimit(BaseRetryPredicate):
    """Wrap a retry predicate with a bounded attempt counter.

    The counter is incremented on every call, before the inner
    predicate is consulted. A ``False`` from the inner predicate is
    always honored. Otherwise the retry is allowed only while the
    counter is below ``limit``; once reached, every later call
    returns ``False``. The counter is never reset.

    Args:
        predicate: The inner retry predicate.
        limit: The maximum number of attempts of the operation. A
            value <= 0 disables retries.

    Attributes:
        predicate: The inner retry predicate.
        limit: The maximum number of attempts.
        attempts: The number of failures seen so far.

    Raises:
        TypeError: If ``limit`` is not an integer.

    Example:
        ```pycon
        >>> from aretry import WithLimit, always
        >>> predicate = WithLimit(always, limit=3)
        >>> [predicate(ValueError()) for _ in range(4)]
        [True, True, False, False]

        ```
    """

    def __init__(self, predicate: Callable[[Any], bool], limit: int) -> None:
        validate_limit(limit)
        self.predicate = predicate
        self.limit = limit
        self.attempts = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(predicate={self.predicate!r}, limit={self.limit}, "
            f"attempts={self.attempts})"
        )

    def __call__(self, failure: Any) -> bool:
        self.attempts += 1
        if not self.predicate(failure):
            return False
        if self.attempts < self.limit:
            return True
        logger.debug(f"Retry limit reached ({self.attempts}/{self.limit})")
        return False


def limit(limit: int) -> WithLimit:
    """Retry unconditionally until ``limit`` attempts have been made.

    This is a shortcut for ``WithLimit(always, limit)``.

    Args:
        limit: The maximum number of attempts of the operation.

    Returns:
        A new single-use retry predicate.

    Example:
        ```pycon
        >>> from aretry import do, limit
        >>> calls = []
        >>> def operation():
        ...     calls.append(1)
        ...     return "error"
        ...
        >>> do(operation, limit(5))
        'error'
        >>> len(calls)
        5

        ```
    """
    return WithLimit(always, limit)
