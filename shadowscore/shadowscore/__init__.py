"""
ShadowScore: word-level assessment of reading and shadowing practice.

Compares a speech recognizer's transcript against the reference passage,
classifies every word as correct, substituted, deleted or inserted, and
derives word error rate, accuracy and feedback.

Example:
    from shadowscore import SessionStore, evaluate_attempt

    outcome = evaluate_attempt(
        "The quick brown fox",
        "the quick brown",
        "reading",
        store=SessionStore("sessions.json"),
    )
    print(outcome.result.summary)
    print(outcome.feedback.message)
"""

__version__ = "0.1.0"

from shadowscore.config import ShadowScoreSettings, configure, get_settings
from shadowscore.core import compare, feedback, tokenize
from shadowscore.exceptions import (
    ShadowScoreError,
    StoreCorruptError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    TranscriptionError,
)
from shadowscore.models import (
    ComparisonResult,
    Feedback,
    PracticeMode,
    ScoreTier,
    SessionRecord,
    WordDiagnostic,
    WordStatus,
)
from shadowscore.practice import PracticeOutcome, evaluate_attempt, evaluate_recording
from shadowscore.storage import SessionStore

__all__ = [
    "ShadowScoreSettings",
    "configure",
    "get_settings",
    "compare",
    "feedback",
    "tokenize",
    "ShadowScoreError",
    "StoreError",
    "StoreReadError",
    "StoreCorruptError",
    "StoreWriteError",
    "TranscriptionError",
    "ComparisonResult",
    "Feedback",
    "PracticeMode",
    "ScoreTier",
    "SessionRecord",
    "WordDiagnostic",
    "WordStatus",
    "PracticeOutcome",
    "evaluate_attempt",
    "evaluate_recording",
    "SessionStore",
]
