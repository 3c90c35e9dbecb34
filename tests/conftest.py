# tests/conftest.py

"""Pytest configuration and fixtures."""

import logging

import pytest
from hiscores import HiscoreActivity


@pytest.fixture
def ranked_activity() -> HiscoreActivity:
    """An activity with both a rank and a score."""
    return HiscoreActivity(rank=42, score=100)


@pytest.fixture
def unranked_activity() -> HiscoreActivity:
    """An activity the player has never been ranked in."""
    return HiscoreActivity(rank=-1, score=-1)


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG output from the hiscores package."""
    caplog.set_level(logging.DEBUG, logger="hiscores")
    return caplog
