# src/hiscores/schemas/__init__.py

"""Pydantic schemas for hiscores data."""

from .activity import MIN_FIELDS, UNRANKED, HiscoreActivity

__all__ = [
    # Activity
    "HiscoreActivity",
    "MIN_FIELDS",
    "UNRANKED",
]
