r"""Predicate decorator pausing an increasing delay between attempts.

The wait grows quadratically with the retry number, is capped at a
maximum, and receives a random jitter to avoid synchronized retries
across callers.
"""

from __future__ import annotations

__all__ = ["WithExponentialBackoff"]

import logging
import random
import time
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_backoff_params
from aretry.predicates.base import BaseRetryPredicate

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class WithExponentialBackoff(BaseRetryPredicate):
    r"""Wrap a retry predicate to sleep a growing delay before each
    retry.

    The first retry waits ``minimum_wait``. After the n-th retry
    (``attempt = n + 1``) the next wait becomes
    ``min(maximum_wait, minimum_wait * attempt ** 2)``, which gives
    ``minimum_wait``, ``4 * minimum_wait``, ``9 * minimum_wait``, ...
    A random amount drawn uniformly in ``[0, jitter)`` is added to
    every wait, so a single pause never exceeds
    ``maximum_wait + jitter``.

    When the inner predicate refuses the retry, nothing is slept and
    the internal state is left untouched.

    Args:
        predicate: The inner retry predicate.
        minimum_wait: The wait in seconds before the first retry.
            Must be >= 0.
        maximum_wait: The cap of the wait in seconds. Must be >=
            ``minimum_wait``.
        jitter: The upper bound in seconds of the random amount
            added to each wait. Must be >= 0. ``0`` disables jitter.

    Attributes:
        attempt: The internal retry counter, seeded to 1.
        current_wait: The base wait of the next retry.

    Raises:
        ValueError: If the durations are invalid.

    Example:
        ```pycon
        >>> from aretry import WithExponentialBackoff
        >>> predicate = WithExponentialBackoff(
        ...     lambda failure: True, minimum_wait=0.5, maximum_wait=4.0, jitter=0.0
        ... )
        >>> [predicate.compute_wait(attempt) for attempt in range(1, 5)]
        [0.5, 2.0, 4.0, 4.0]

        ```
    """

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        minimum_wait: float,
        maximum_wait: float,
        jitter: float,
    ) -> None:
        validate_backoff_params(minimum_wait=minimum_wait, maximum_wait=maximum_wait, jitter=jitter)
        self.predicate = predicate
        self.minimum_wait = minimum_wait
        self.maximum_wait = maximum_wait
        self.jitter = jitter
        self.attempt = 1
        self.current_wait = minimum_wait

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(predicate={self.predicate!r}, "
            f"minimum_wait={self.minimum_wait}, maximum_wait={self.maximum_wait}, "
            f"jitter={self.jitter})"
        )

    def __call__(self, failure: Any) -> bool:
        if not self.predicate(failure):
            return False

        self.attempt += 1
        jitter = random.random() * self.jitter if self.jitter > 0 else 0.0  # noqa: S311
        logger.debug(
            f"Waiting {self.current_wait + jitter:.2f}s before retry "
            f"(base={self.current_wait:.2f}s, jitter={jitter:.2f}s)"
        )
        time.sleep(self.current_wait + jitter)
        self.current_wait = self.compute_wait(self.attempt)
        return True

    def compute_wait(self, attempt: int) -> float:
        """Compute the base wait for a given value of the counter.

        Args:
            attempt: The value of the internal counter (1 for the
                first retry).

        Returns:
            ``min(maximum_wait, minimum_wait * attempt ** 2)``.
        """
        return min(self.maximum_wait, self.minimum_wait * attempt**2)
