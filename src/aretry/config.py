r"""Configuration dataclass and defaults for retry policies.

This module provides configuration constants and a dataclass-based
configuration object that builds fresh predicate chains, so a policy
can be declared once and used for many independent retry loops.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_JITTER",
    "DEFAULT_LIMIT",
    "DEFAULT_MAXIMUM_WAIT",
    "RetryConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_backoff_params, validate_delay, validate_limit
from aretry.predicates.backoff import WithExponentialBackoff
from aretry.predicates.base import always
from aretry.predicates.limit import WithLimit
from aretry.predicates.wait import WithWait

if TYPE_CHECKING:
    from collections.abc import Callable

# Default maximum number of attempts (initial attempt included)
DEFAULT_LIMIT = 3

# Default cap of the exponential backoff, in seconds
DEFAULT_MAXIMUM_WAIT = 10.0

# Default jitter upper bound, in seconds
DEFAULT_JITTER = 0.0


@dataclass
class RetryConfig:
    """Declarative retry policy.

    A predicate chain is stateful and single use. ``RetryConfig``
    keeps the policy parameters and builds a new chain for each run
    with ``build``.

    The chain is ``retry_if`` (or ``always``), wrapped by ``WithLimit``
    when ``limit`` is set, wrapped by ``WithWait`` when ``wait`` is set
    or by ``WithExponentialBackoff`` when ``minimum_wait`` is set. The
    limit sits inside the pause, so no time is slept before giving up.

    Args:
        limit: Maximum number of attempts, or ``None`` for no limit.
        wait: Fixed delay in seconds between attempts.
        minimum_wait: First delay of the exponential backoff. Enables
            the backoff when set. Cannot be combined with ``wait``.
        maximum_wait: Cap of the exponential backoff delay.
        jitter: Upper bound of the random amount added to each
            exponential backoff delay.
        retry_if: Optional predicate deciding which failures are
            retryable. Defaults to retrying every failure.

    Raises:
        ValueError: If a duration is invalid, if both ``wait`` and
            ``minimum_wait`` are set, or if a non-zero ``jitter`` is
            given without ``minimum_wait``.

    Example:
        ```pycon
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig(limit=5, wait=0.5)
        >>> predicate = config.build()
        >>> predicate.delay, predicate.predicate.limit
        (0.5, 5)
        >>> config.merge(limit=10).limit
        10

        ```
    """

    limit: int | None = DEFAULT_LIMIT
    wait: float | None = None
    minimum_wait: float | None = None
    maximum_wait: float = DEFAULT_MAXIMUM_WAIT
    jitter: float = DEFAULT_JITTER
    retry_if: Callable[[Any], bool] | None = None

    def __post_init__(self) -> None:
        if self.limit is not None:
            validate_limit(self.limit)
        validate_delay(self.maximum_wait, name="maximum_wait")
        validate_delay(self.jitter, name="jitter")
        if self.wait is not None:
            validate_delay(self.wait, name="wait")
            if self.minimum_wait is not None:
                msg = "wait and minimum_wait are mutually exclusive"
                raise ValueError(msg)
        if self.minimum_wait is None and self.jitter != DEFAULT_JITTER:
            msg = (
                f"jitter is only applied to exponential backoff, got jitter={self.jitter} "
                "without minimum_wait"
            )
            raise ValueError(msg)
        if self.minimum_wait is not None:
            validate_backoff_params(
                minimum_wait=self.minimum_wait, maximum_wait=self.maximum_wait, jitter=self.jitter
            )

    def build(self) -> Callable[[Any], bool]:
        """Build a new predicate chain implementing this policy.

        Returns:
            A new single-use retry predicate.
        """
        predicate = self.retry_if if self.retry_if is not None else always
        if self.limit is not None:
            predicate = WithLimit(predicate, self.limit)
        if self.wait is not None:
            predicate = WithWait(predicate, self.wait)
        elif self.minimum_wait is not None:
            predicate = WithExponentialBackoff(
                predicate,
                minimum_wait=self.minimum_wait,
                maximum_wait=self.maximum_wait,
                jitter=self.jitter,
            )
        return predicate

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, so ``merge`` cannot
        reset ``limit``, ``wait`` or ``minimum_wait`` to ``None``. Use
        ``dataclasses.replace`` to clear a field, e.g. to switch a fixed
        wait policy to exponential backoff.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from aretry.config import RetryConfig
            >>> config = RetryConfig(limit=3)
            >>> config.merge(limit=5, wait=None).limit
            5
            >>> config.limit
            3

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the retry policy parameters.
        """
        return {
            "limit": self.limit,
            "wait": self.wait,
            "minimum_wait": self.minimum_wait,
            "maximum_wait": self.maximum_wait,
            "jitter": self.jitter,
            "retry_if": self.retry_if,
        }
