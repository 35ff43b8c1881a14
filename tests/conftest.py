"""
Shared fixtures and test configuration for ShadowScore tests.
"""

import pytest
from shadowscore.config import ShadowScoreSettings
from shadowscore.core import compare
from shadowscore.models import PracticeMode, SessionRecord
from shadowscore.storage import SessionStore


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the store at a temporary directory."""
    return ShadowScoreSettings(store_path=tmp_path / "practice_sessions.json")


@pytest.fixture
def store(settings):
    """Empty session store backed by a temporary file."""
    return SessionStore(settings=settings)


@pytest.fixture
def sample_result():
    """Comparison with one substitution and one deletion."""
    return compare("The quick brown fox jumps", "the quack brown fox")


@pytest.fixture
def sample_record(sample_result):
    """Session record built from ``sample_result``."""
    return SessionRecord.create(
        sample_result,
        PracticeMode.READING,
        duration=4.2,
        audio_path="recordings/attempt-1.m4a",
    )


@pytest.fixture
def comparison_cases():
    """(reference, recognized, distance, accuracy) scenarios."""
    return [
        ("the quick brown fox", "the quick brown fox", 0, 100.0),
        ("the quick brown fox", "the quick brown", 1, 75.0),
        ("the quick brown fox", "the quick red fox", 1, 75.0),
        ("the quick brown fox", "the very quick brown fox", 1, 75.0),
        ("one two", "three four five six seven", 5, 0.0),
        ("", "hello", 1, 100.0),
        ("", "", 0, 100.0),
    ]
