r"""Retry predicates and predicate decorators.

Predicate decorators wrap an inner predicate and add one concern each
(attempt limit, fixed wait, exponential backoff). They return a
predicate of the same shape, so they can be stacked freely.
"""

from __future__ import annotations

__all__ = [
    "BaseRetryPredicate",
    "WithExponentialBackoff",
    "WithLimit",
    "WithWait",
    "always",
    "limit",
    "never",
]

from aretry.predicates.backoff import WithExponentialBackoff
from aretry.predicates.base import BaseRetryPredicate, always, never
from aretry.predicates.limit import WithLimit, limit
from aretry.predicates.wait import WithWait
