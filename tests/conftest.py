"""
Pytest fixtures and configuration for all tests.
"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from bookofrecords.core.config import Settings
from bookofrecords.models.stats import HallStat


@pytest.fixture
def book_date():
    """Fixed date so page 1 is deterministic."""
    return date(2026, 10, 19)


@pytest.fixture
def sample_records():
    """Small UserRecordSet covering direct and derived categories."""
    return {
        "Zippy": {
            HallStat.WEALTH: 500,
            HallStat.LIFETIME: 10,
            HallStat.TRAVEL: 30,
            HallStat.BODY_CHANGES: 5,
        },
        "Max": {
            HallStat.WEALTH: 1200,
            HallStat.LIFETIME: 5,
            HallStat.TRAVEL: 5,
            HallStat.KILLS: 3,
        },
        "Newborn": {
            HallStat.LIFETIME: 0,
            HallStat.BODY_CHANGES: 4,
        },
    }


@pytest.fixture
def sample_user_docs():
    """User documents as stored in the odb collection."""
    return [
        {
            "ref": "user-zippy",
            "name": "Zippy",
            "mods": [{"type": "Avatar", "stats": {"1": 10, "18": 500, "12": 30}}],
        },
        {
            "ref": "user-max",
            "name": "Max",
            "mods": [{"type": "Avatar", "stats": [0, 5, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 5, 0, 0, 0, 0, 0, 1200]}],
        },
        {
            "ref": "user-ghost",
            "name": "Ghost",
            "mods": [],
        },
        {
            "ref": "user-nostats",
            "name": "Nostats",
            "mods": [{"type": "Avatar"}],
        },
    ]


@pytest.fixture
def mock_db(sample_user_docs):
    """
    Motor database double: db[collection].find(...).to_list() returns the user docs.
    """
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=sample_user_docs)

    collection = MagicMock()
    collection.find.return_value = cursor

    db = MagicMock()
    db.__getitem__.return_value = collection
    return db


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the output to a temporary directory."""
    return Settings(
        mongo="localhost:27017/elko_test",
        book=str(tmp_path / "Text" / "text-bookofrecords.json"),
        trace="debug",
    )
