r"""Parameter validation utilities for retry predicates.

This module provides validation functions for the parameters of the
predicate decorators to ensure they meet the required constraints
before a retry loop starts.
"""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_delay", "validate_limit"]


def validate_limit(limit: int) -> None:
    """Validate a retry limit.

    Any integer is accepted. A value <= 0 means the first failure is
    never retried.

    Args:
        limit: The maximum number of attempts.

    Raises:
        TypeError: If ``limit`` is not an integer.

    Example:
        ```pycon
        >>> from aretry.core import validate_limit
        >>> validate_limit(5)
        >>> validate_limit(0)
        >>> validate_limit(2.5)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        TypeError: limit must be an int, got float

        ```
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        msg = f"limit must be an int, got {type(limit).__name__}"
        raise TypeError(msg)


def validate_delay(delay: float, name: str = "delay") -> None:
    """Validate a duration in seconds.

    Args:
        delay: The duration to validate. Must be >= 0 (NaN is
            rejected).
        name: The parameter name used in the error message.

    Raises:
        ValueError: If ``delay`` is negative or NaN.

    Example:
        ```pycon
        >>> from aretry.core import validate_delay
        >>> validate_delay(0.5)
        >>> validate_delay(-1.0, name="jitter")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: jitter must be >= 0, got -1.0

        ```
    """
    if not delay >= 0:
        msg = f"{name} must be >= 0, got {delay}"
        raise ValueError(msg)


def validate_backoff_params(minimum_wait: float, maximum_wait: float, jitter: float) -> None:
    """Validate exponential backoff parameters.

    Args:
        minimum_wait: The wait before the first retry. Must be >= 0.
        maximum_wait: The cap of the growing wait. Must be >=
            ``minimum_wait``.
        jitter: The upper bound of the random amount added to each
            wait. Must be >= 0.

    Raises:
        ValueError: If any parameter is negative, or if
            ``maximum_wait`` is lower than ``minimum_wait``.
    """
    validate_delay(minimum_wait, name="minimum_wait")
    validate_delay(maximum_wait, name="maximum_wait")
    validate_delay(jitter, name="jitter")
    if maximum_wait < minimum_wait:
        msg = (
            f"maximum_wait must be >= minimum_wait, got maximum_wait={maximum_wait} "
            f"and minimum_wait={minimum_wait}"
        )
        raise ValueError(msg)
