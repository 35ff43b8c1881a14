"""
Practice session record data model.
"""

import math
from collections import Counter
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator, model_validator

from shadowscore.config import ShadowScoreSettings
from shadowscore.models.diagnostic import WordStatus
from shadowscore.models.feedback import ScoreTier
from shadowscore.models.result import ComparisonResult


class PracticeMode(str, Enum):
    """Kind of practice the attempt belongs to."""

    READING = "reading"  # read the passage aloud
    SHADOWING = "shadowing"  # repeat after a model recording


class WordError(BaseModel):
    """A single mistake kept on a session record."""

    original_word: Optional[str] = None
    user_word: Optional[str] = None
    error_type: WordStatus
    position: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @field_validator("error_type")
    @classmethod
    def must_be_error(cls, v: WordStatus) -> WordStatus:
        """Correct words are never stored as errors."""
        if v == WordStatus.CORRECT:
            raise ValueError("error_type cannot be 'correct'")
        return v


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionRecord(BaseModel):
    """
    Persisted record of one completed practice attempt.

    Holds a snapshot of the comparison's derived fields taken when the
    attempt finished, so later scoring changes never rewrite history.
    Records are frozen and only ever replaced wholesale in the store.

    Attributes:
        id: Unique identifier generated at creation
        practice_type: Reading or shadowing
        created_at: Creation time (UTC, ISO-8601 when serialized)
        original_text: Reference text
        user_text: Recognized transcript
        score: Accuracy percentage (0-100)
        word_error_rate: Word error rate at creation time
        total_words: Number of reference words
        correct_words: Reference words spoken correctly
        substitutions: Substituted reference words
        deletions: Missed reference words
        insertions: Extra spoken words
        word_errors: Every mistake in reading order
        duration: Recording length in seconds, if known
        audio_path: Path or URI of the recording, stored verbatim
    """

    id: UUID = Field(default_factory=uuid4)
    practice_type: PracticeMode
    created_at: datetime = Field(default_factory=_utcnow)

    original_text: str
    user_text: str
    score: float = Field(..., ge=0.0, le=100.0)
    word_error_rate: float = Field(..., ge=0.0)
    total_words: int = Field(..., ge=0)
    correct_words: int = Field(..., ge=0)
    substitutions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    insertions: int = Field(default=0, ge=0)
    word_errors: tuple[WordError, ...] = ()

    duration: Optional[float] = Field(
        default=None,
        description="Recording duration in seconds",
        ge=0.0,
        allow_inf_nan=False,
    )
    audio_path: Optional[str] = Field(
        default=None,
        description="Reference to the associated audio artifact",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                    "practice_type": "reading",
                    "created_at": "2026-10-18T09:30:00Z",
                    "original_text": "The quick brown fox",
                    "user_text": "the quick brown",
                    "score": 75.0,
                    "word_error_rate": 0.25,
                    "total_words": 4,
                    "correct_words": 3,
                    "substitutions": 0,
                    "deletions": 1,
                    "insertions": 0,
                    "word_errors": [
                        {
                            "original_word": "fox",
                            "user_word": None,
                            "error_type": "deletion",
                            "position": 3,
                        }
                    ],
                    "duration": 4.2,
                    "audio_path": "recordings/attempt-1.m4a",
                }
            ]
        },
    }

    @model_validator(mode="after")
    def snapshot_is_consistent(self) -> "SessionRecord":
        """Counts, score and word errors must describe one comparison."""
        if self.correct_words + self.substitutions + self.deletions != self.total_words:
            raise ValueError(
                "correct_words + substitutions + deletions must equal total_words"
            )
        expected = max(0.0, min(100.0, (1.0 - self.word_error_rate) * 100.0))
        if not math.isclose(self.score, expected, abs_tol=1e-9):
            raise ValueError("score must equal clamp(0, 100, (1 - word_error_rate) * 100)")

        by_type = Counter(e.error_type for e in self.word_errors)
        for error_type, count in (
            (WordStatus.SUBSTITUTION, self.substitutions),
            (WordStatus.DELETION, self.deletions),
            (WordStatus.INSERTION, self.insertions),
        ):
            if by_type[error_type] != count:
                raise ValueError(
                    f"{by_type[error_type]} {error_type.value} word errors recorded, "
                    f"expected {count}"
                )
        return self

    @classmethod
    def create(
        cls,
        result: ComparisonResult,
        practice_type: PracticeMode | str,
        duration: float | None = None,
        audio_path: str | None = None,
    ) -> "SessionRecord":
        """
        Snapshot a comparison result into a new session record.

        Args:
            result: The comparison the attempt produced
            practice_type: Reading or shadowing
            duration: Recording length in seconds
            audio_path: Path or URI of the recording

        Returns:
            New record with a fresh id and creation time
        """
        word_errors = tuple(
            WordError(
                original_word=d.reference_word,
                user_word=d.recognized_word,
                error_type=d.status,
                position=d.position,
            )
            for d in result.errors
        )
        return cls(
            practice_type=PracticeMode(practice_type),
            original_text=result.original_text,
            user_text=result.recognized_text,
            score=result.accuracy,
            word_error_rate=result.word_error_rate,
            total_words=result.total_words,
            correct_words=result.correct_words,
            substitutions=result.substitutions,
            deletions=result.deletions,
            insertions=result.insertions,
            word_errors=word_errors,
            duration=duration,
            audio_path=audio_path,
        )

    @property
    def score_tier(self) -> ScoreTier:
        """
        Tier for the stored score under the current global thresholds.

        Only the score is persisted, so reconfiguring the thresholds changes
        the tier reported for historical records. Use ``tier`` to pin them.
        """
        return self.tier()

    def tier(self, settings: ShadowScoreSettings | None = None) -> ScoreTier:
        """Tier for the stored score under the given thresholds."""
        from shadowscore.core.guidance import tier_for

        return tier_for(self.score, settings)

    @property
    def formatted_score(self) -> str:
        return f"{self.score:.0f}%"

    @property
    def formatted_duration(self) -> str | None:
        """Duration as ``m:ss``, or None when unknown."""
        if self.duration is None:
            return None
        minutes, seconds = divmod(int(self.duration), 60)
        return f"{minutes}:{seconds:02d}"

    @property
    def title(self) -> str:
        """First few words of what was said, for history listings."""
        for text in (self.user_text, self.original_text):
            words = " ".join(text.split()[:5])
            if words:
                return words[:30] + "..." if len(words) > 30 else words
        return self.practice_type.value

    @property
    def error_summary(self) -> str:
        """Per-type error counts, e.g. ``substitution: 1, deletion: 2``."""
        parts = []
        for error_type in (WordStatus.SUBSTITUTION, WordStatus.DELETION, WordStatus.INSERTION):
            n = sum(1 for e in self.word_errors if e.error_type == error_type)
            if n:
                parts.append(f"{error_type.value}: {n}")
        return ", ".join(parts) if parts else "no errors"

    def __str__(self) -> str:
        return f"SessionRecord({self.practice_type.value}, {self.formatted_score})"
