r"""aretry - Composable retry policies.

This package repeatedly invokes an operation until it succeeds or a
retry predicate gives up. Policies are built by stacking predicate
decorators around a base predicate.

Key Features:
    - Retry loop with a return-value contract (``do``) or an
      exception contract (``call_with_retry`` and ``retry``)
    - Composable predicate decorators: attempt limit, fixed wait,
      exponential backoff with jitter
    - Caller-supplied predicates decide which failures are retryable
    - Declarative ``RetryConfig`` building a fresh predicate chain for
      every run

Example:
    ```pycon
    >>> from aretry import WithLimit, WithWait, do
    >>> def is_server_error(failure):
    ...     return str(failure).startswith("5")
    ...
    >>> statuses = iter(["503", "500", "404"])
    >>> do(lambda: next(statuses), WithWait(WithLimit(is_server_error, 5), delay=0.0))
    '404'

    ```
"""

from __future__ import annotations

__all__ = [
    "BaseRetryPredicate",
    "RetryConfig",
    "WithExponentialBackoff",
    "WithLimit",
    "WithWait",
    "__version__",
    "always",
    "call_with_retry",
    "do",
    "limit",
    "never",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.config import RetryConfig
from aretry.decorator import retry
from aretry.loop import call_with_retry, do
from aretry.predicates import (
    BaseRetryPredicate,
    WithExponentialBackoff,
    WithLimit,
    WithWait,
    always,
    limit,
    never,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
