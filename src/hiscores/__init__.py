# src/hiscores/__init__.py

"""Player standings parsed from game hiscores rows."""

from .exceptions import (
    HiscoresError,
    InvalidArgumentError,
    InvalidRankError,
    InvalidScoreError,
    ValidationError,
)
from .schemas import UNRANKED, HiscoreActivity

__all__ = [
    "HiscoreActivity",
    "UNRANKED",
    # Errors
    "HiscoresError",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidRankError",
    "InvalidScoreError",
]
