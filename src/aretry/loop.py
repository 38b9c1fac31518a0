r"""Retry loops driving an operation with a retry predicate.

The loops own no policy: waiting, limiting and classification are
delegated to the retry predicate. ``do`` follows a return-value
contract (``None`` means success), ``call_with_retry`` follows the
usual Python contract where a failure is an exception.
"""

from __future__ import annotations

__all__ = ["call_with_retry", "do"]

import logging
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def do(operation: Callable[[], Any], predicate: Callable[[Any], bool]) -> Any:
    """Invoke an operation until it succeeds or the predicate gives up.

    The operation returns ``None`` on success and any other value as
    failure signal. After each failure the predicate is called with
    the failure signal; the operation is invoked again while it
    returns ``True``.

    There is no implicit cap: with a predicate that always returns
    ``True`` (e.g. ``always``) the loop only ends when the operation
    succeeds. Wrap the predicate with ``WithLimit`` to bound it.

    Args:
        operation: The zero-argument callable to invoke.
        predicate: The retry predicate. Stateful predicates must not
            be reused across calls.

    Returns:
        ``None`` if the operation succeeded, otherwise the last
        failure signal, returned unchanged.

    Example:
        ```pycon
        >>> from aretry import always, do
        >>> results = iter(["error", "error", None])
        >>> do(lambda: next(results), always) is None
        True

        ```
    """
    attempt = 0
    while True:
        attempt += 1
        failure = operation()
        if failure is None:
            return None
        logger.debug(f"Attempt {attempt} failed: {failure!r}")
        if not predicate(failure):
            logger.debug(f"Giving up after {attempt} attempt(s)")
            return failure


def call_with_retry(
    func: Callable[..., T], predicate: Callable[[Exception], bool], *args: Any, **kwargs: Any
) -> T:
    """Call a function until it returns or the predicate gives up.

    Any ``Exception`` raised by ``func`` is the failure signal passed
    to the predicate. When the predicate returns ``False`` the same
    exception object is re-raised. Exceptions that do not derive from
    ``Exception`` (e.g. ``KeyboardInterrupt``) are never retried.

    Args:
        func: The function to call.
        predicate: The retry predicate, called with the raised
            exception.
        *args: Positional arguments passed to ``func``.
        **kwargs: Keyword arguments passed to ``func``.

    Returns:
        The value returned by the first successful call.

    Raises:
        Exception: The last exception raised by ``func`` when the
            predicate stops the retries.

    Example:
        ```pycon
        >>> from aretry import call_with_retry, limit
        >>> calls = []
        >>> def flaky(value):
        ...     calls.append(value)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unavailable")
        ...     return value * 2
        ...
        >>> call_with_retry(flaky, limit(5), 21)
        42
        >>> len(calls)
        3

        ```
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            logger.debug(f"Attempt {attempt} of {func!r} raised {type(exc).__name__}: {exc}")
            if not predicate(exc):
                logger.debug(f"Giving up after {attempt} attempt(s)")
                raise
