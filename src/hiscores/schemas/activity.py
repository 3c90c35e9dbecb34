# src/hiscores/schemas/activity.py

"""Pydantic schema for a player's standing in a single hiscores activity."""

import csv
import logging
from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hiscores.exceptions import (
    InvalidArgumentError,
    InvalidRankError,
    InvalidScoreError,
)
from hiscores.parsing import parse_int

logger = logging.getLogger(__name__)

# Sentinel used by the hiscores for both rank and score when a player has
# no standing in an activity.
UNRANKED = -1

# A row carries rank then score; anything after that is ignored.
MIN_FIELDS = 2


class HiscoreActivity(BaseModel):
    """A player's rank and score in one activity on the hiscores.

    The raw values keep the ``-1`` sentinel so equality and hashing work on
    exactly what the hiscores reported. The ``rank`` and ``score``
    properties translate the sentinel to None.

    Attributes:
        raw_rank: Rank as reported, -1 if unranked (populated via ``rank``)
        raw_score: Score as reported, -1 if unranked (populated via ``score``)
    """

    raw_rank: int = Field(
        ..., alias="rank", description="Rank in the activity, -1 if unranked"
    )
    raw_score: int = Field(
        ..., alias="score", description="Score in the activity, -1 if unranked"
    )

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("raw_rank")
    @classmethod
    def validate_rank(cls, value: int) -> int:
        if value != UNRANKED and value <= 0:
            raise InvalidRankError(value)
        return value

    @field_validator("raw_score")
    @classmethod
    def validate_score(cls, value: int) -> int:
        if value < UNRANKED:
            raise InvalidScoreError(value)
        return value

    # ===============================================
    # == Lenient constructors
    # ===============================================

    @classmethod
    def from_csv(cls, record: Sequence[str]) -> "HiscoreActivity | None":
        """Create an activity from the fields of a hiscores row.

        Args:
            record: The row's text fields; field 0 is the rank and field 1
                the score. Extra fields are ignored. A bare string is a line,
                not a row, and is rejected; use from_csv_line for that.

        Returns:
            The activity, or None if the row was too short, either field was
            not an integer, or the integers were out of range.
        """
        if isinstance(record, str):
            logger.debug(
                "Rejected activity row: expected a sequence of fields, got text %r",
                record,
            )
            return None

        if len(record) < MIN_FIELDS:
            logger.debug(
                "Rejected activity row: expected %d fields, got %d",
                MIN_FIELDS,
                len(record),
                extra={"record": list(record)},
            )
            return None

        rank = parse_int(record[0])
        if rank is None:
            logger.debug(
                "Rejected activity row: rank %r is not an integer",
                record[0],
                extra={"record": list(record)},
            )
            return None

        score = parse_int(record[1])
        if score is None:
            logger.debug(
                "Rejected activity row: score %r is not an integer",
                record[1],
                extra={"record": list(record)},
            )
            return None

        try:
            return cls(rank=rank, score=score)
        except InvalidArgumentError as e:
            logger.debug(
                "Rejected activity row: %s", e.message, extra=e.details
            )
            return None

    @classmethod
    def from_csv_line(cls, line: str) -> "HiscoreActivity | None":
        """Create an activity from a single comma-separated line of text."""
        try:
            record = next(csv.reader([line]), [])
        except csv.Error as e:
            logger.debug("Rejected activity row: %s", e, extra={"line": line})
            return None
        return cls.from_csv(record)

    # ===============================================
    # == Accessors
    # ===============================================

    @property
    def rank(self) -> int | None:
        """The player's rank, or None if unranked in this activity."""
        return None if self.raw_rank == UNRANKED else self.raw_rank

    @property
    def score(self) -> int | None:
        """The player's score, or None if unranked in this activity."""
        return None if self.raw_score == UNRANKED else self.raw_score

    @property
    def is_ranked(self) -> bool:
        """Whether the player has a rank in this activity."""
        return self.rank is not None

    def __repr_args__(self) -> Iterator[tuple[str, Any]]:
        # Absent values are shown as the sentinel for readability.
        yield "rank", UNRANKED if self.rank is None else self.rank
        yield "score", UNRANKED if self.score is None else self.score
