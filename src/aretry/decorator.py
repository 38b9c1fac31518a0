r"""Decorator applying a retry policy to a function."""

from __future__ import annotations

__all__ = ["retry"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.config import RetryConfig
from aretry.loop import call_with_retry

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def retry(
    policy: RetryConfig | Callable[[], Callable[[Any], bool]],
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Retry a function according to a policy.

    A new predicate chain is built for every call of the decorated
    function, so concurrent or successive calls never share attempt
    counters.

    Args:
        policy: A ``RetryConfig``, or a zero-argument factory returning
            a new retry predicate.

    Returns:
        The decorator.

    Example:
        ```pycon
        >>> from aretry import limit, retry
        >>> calls = []
        >>> @retry(lambda: limit(3))
        ... def fetch():
        ...     calls.append(1)
        ...     if len(calls) < 2:
        ...         raise TimeoutError
        ...     return "data"
        ...
        >>> fetch()
        'data'
        >>> len(calls)
        2

        ```
    """
    factory = policy.build if isinstance(policy, RetryConfig) else policy

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return call_with_retry(func, factory(), *args, **kwargs)

        return wrapper

    return decorator
