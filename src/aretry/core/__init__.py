r"""Validation helpers shared by the retry predicates."""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_delay", "validate_limit"]

from aretry.core.validation import validate_backoff_params, validate_delay, validate_limit
