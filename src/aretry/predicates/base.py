r"""Base class and elementary retry predicates.

A retry predicate is any callable taking the latest failure signal and
returning whether the operation should be attempted again. Stateful
predicate decorators derive from ``BaseRetryPredicate``.
"""

from __future__ import annotations

__all__ = ["BaseRetryPredicate", "always", "never"]

from abc import ABC, abstractmethod
from typing import Any


class BaseRetryPredicate(ABC):
    """Abstract base class for retry predicates.

    A retry predicate receives the failure signal returned (or raised)
    by the last attempt and decides whether to attempt the operation
    again. Instances usually own private state (attempt counters,
    current wait) which is not reset, so a predicate must be used for
    a single retry loop run only.
    """

    @abstractmethod
    def __call__(self, failure: Any) -> bool:
        """Decide whether to retry after a failure.

        Args:
            failure: The failure signal of the last attempt. It is
                opaque to the predicate decorators and only
                inspected by caller-supplied predicates.

        Returns:
            ``True`` if the operation should be attempted again,
            otherwise ``False``.
        """


def always(failure: Any) -> bool:  # noqa: ARG001
    """Retry unconditionally.

    Used without a limiting decorator, this predicate makes the retry
    loop run until the operation succeeds, possibly forever.

    Args:
        failure: The failure signal (ignored).

    Returns:
        Always ``True``.

    Example:
        ```pycon
        >>> from aretry import always
        >>> always(ValueError("boom"))
        True

        ```
    """
    return True


def never(failure: Any) -> bool:  # noqa: ARG001
    """Never retry.

    Example:
        ```pycon
        >>> from aretry import never
        >>> never(ValueError("boom"))
        False

        ```
    """
    return False
