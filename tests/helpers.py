r"""Shared test helpers for retry loop tests.

This module contains operations with a scripted sequence of outcomes
and counting wrappers used across multiple test files.
"""

from __future__ import annotations

__all__ = [
    "CountingPredicate",
    "ERROR_DONT_RETRY",
    "ERROR_TEST",
    "error_for_n_calls",
    "raise_for_n_calls",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

ERROR_TEST = ValueError("test error")
ERROR_DONT_RETRY = ValueError("dont retry this error")


def error_for_n_calls(n: int, failure: Any = ERROR_TEST) -> Callable[[], Any]:
    """Create an operation failing ``n`` times then succeeding.

    Args:
        n: The number of failing calls. A negative value means the
            operation never succeeds.
        failure: The failure signal returned by failing calls.

    Returns:
        A zero-argument operation. The number of calls is available
        through its ``calls`` attribute.
    """

    def operation() -> Any:
        operation.calls += 1
        if n < 0 or operation.calls <= n:
            return failure
        return None

    operation.calls = 0
    return operation


def raise_for_n_calls(n: int, exc: Exception = ERROR_TEST, result: Any = "ok") -> Callable[[], Any]:
    """Create a function raising ``exc`` ``n`` times then returning
    ``result``."""

    def func() -> Any:
        func.calls += 1
        if n < 0 or func.calls <= n:
            raise exc
        return result

    func.calls = 0
    return func


class CountingPredicate:
    """Retry predicate recording the failures it receives.

    Args:
        answers: The successive answers. The last answer is repeated
            once the sequence is exhausted.
    """

    def __init__(self, *answers: bool) -> None:
        self.answers = answers or (True,)
        self.failures: list[Any] = []

    def __call__(self, failure: Any) -> bool:
        self.failures.append(failure)
        index = min(len(self.failures), len(self.answers)) - 1
        return self.answers[index]
