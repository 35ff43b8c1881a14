"""
Comparison result data model.
"""

import math

from pydantic import BaseModel, Field, model_validator

from shadowscore.models.diagnostic import WordDiagnostic, WordStatus


class ComparisonResult(BaseModel):
    """
    Outcome of comparing a recognized transcript against a reference text.

    Immutable value: the word diagnostics plus everything derived from them.
    ``correct_words + substitutions + deletions == total_words`` always
    holds; insertions are counted on top of the reference length.

    Attributes:
        original_text: Reference text exactly as supplied
        recognized_text: Transcript exactly as supplied
        diagnostics: Word diagnostics in reading order
        total_words: Number of reference tokens
        correct_words: Reference tokens spoken correctly
        substitutions: Reference tokens spoken as a different word
        deletions: Reference tokens not spoken
        insertions: Extra spoken tokens
        word_error_rate: Edit distance divided by reference length
        accuracy: ``(1 - word_error_rate) * 100`` clamped to [0, 100]
    """

    original_text: str = Field(..., description="Reference text")
    recognized_text: str = Field(..., description="Recognized transcript")
    diagnostics: tuple[WordDiagnostic, ...] = Field(
        default=(),
        description="Word diagnostics in reading order",
    )
    total_words: int = Field(..., ge=0)
    correct_words: int = Field(..., ge=0)
    substitutions: int = Field(..., ge=0)
    deletions: int = Field(..., ge=0)
    insertions: int = Field(..., ge=0)
    word_error_rate: float = Field(
        ...,
        description="Word error rate (can exceed 1.0)",
        ge=0.0,
    )
    accuracy: float = Field(
        ...,
        description="Accuracy percentage (0-100)",
        ge=0.0,
        le=100.0,
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def counts_cover_reference(self) -> "ComparisonResult":
        """Every reference word is either correct, substituted or deleted."""
        if self.correct_words + self.substitutions + self.deletions != self.total_words:
            raise ValueError(
                "correct_words + substitutions + deletions must equal total_words"
            )
        expected = max(0.0, min(100.0, (1.0 - self.word_error_rate) * 100.0))
        if not math.isclose(self.accuracy, expected, abs_tol=1e-9):
            raise ValueError("accuracy must equal clamp(0, 100, (1 - word_error_rate) * 100)")
        return self

    @property
    def errors(self) -> list[WordDiagnostic]:
        """Diagnostics that are not correct, in reading order."""
        return [d for d in self.diagnostics if d.is_error]

    @property
    def error_count(self) -> int:
        return self.substitutions + self.deletions + self.insertions

    @property
    def is_perfect(self) -> bool:
        """True when every reference word was spoken and nothing extra was."""
        return self.error_count == 0

    def count(self, status: WordStatus) -> int:
        """Number of diagnostics with the given status."""
        return sum(1 for d in self.diagnostics if d.status == status)

    @property
    def formatted_accuracy(self) -> str:
        return f"{self.accuracy:.1f}%"

    @property
    def formatted_wer(self) -> str:
        return f"{self.word_error_rate:.2f}"

    @property
    def summary(self) -> str:
        """One-line summary, e.g. ``Accuracy: 75.0% | Correct: 3/4 words``."""
        return (
            f"Accuracy: {self.formatted_accuracy} | "
            f"Correct: {self.correct_words}/{self.total_words} words"
        )

    def __str__(self) -> str:
        return f"ComparisonResult({self.summary})"
