# src/hiscores/exceptions.py

"""Custom exception hierarchy for hiscores.

Only contract violations raise. Malformed text rows are reported as an
absent value by the lenient constructors and never reach this hierarchy.
"""

from __future__ import annotations


class HiscoresError(Exception):
    """Base exception for all hiscores errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional context for logging/debugging
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(HiscoresError):
    """Base class for validation errors."""

    pass


class InvalidArgumentError(ValidationError):
    """Raised when a value is outside the domain of its field."""

    def __init__(self, field: str, value: int, reason: str) -> None:
        super().__init__(
            message=f"Invalid {field} {value}: {reason}",
            details={"field": field, "value": value, "reason": reason},
        )


class InvalidRankError(InvalidArgumentError):
    """Raised when a rank is neither -1 (unranked) nor positive."""

    def __init__(self, rank: int) -> None:
        super().__init__(
            "rank", rank, "rank must be either -1 (unranked) or positive"
        )


class InvalidScoreError(InvalidArgumentError):
    """Raised when a score is neither -1 (unranked) nor non-negative."""

    def __init__(self, score: int) -> None:
        super().__init__(
            "score", score, "score must be either -1 (unranked) or non-negative"
        )
