"""
Word-level diagnostic data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class WordStatus(str, Enum):
    """How a reference slot relates to the recognized transcript."""

    CORRECT = "correct"
    SUBSTITUTION = "substitution"
    DELETION = "deletion"  # reference word was not spoken
    INSERTION = "insertion"  # spoken word has no reference counterpart

    @property
    def is_error(self) -> bool:
        return self is not WordStatus.CORRECT


class WordDiagnostic(BaseModel):
    """
    One step of the word alignment between reference and recognized text.

    Attributes:
        reference_word: Token from the reference text (None for insertions)
        recognized_word: Token from the transcript (None for deletions)
        position: Index into the reference tokens; for insertions, the
            reference index the extra word was inserted before
        status: Classification of this step
        similarity: Character similarity of the two words (substitutions only)
    """

    reference_word: Optional[str] = Field(
        default=None,
        description="Token from the reference text",
    )
    recognized_word: Optional[str] = Field(
        default=None,
        description="Token from the recognized transcript",
    )
    position: int = Field(
        ...,
        description="Index into the reference token sequence (or insertion point)",
        ge=0,
    )
    status: WordStatus = Field(
        ...,
        description="Alignment classification",
    )
    similarity: Optional[float] = Field(
        default=None,
        description="Character-level similarity of a substituted pair (0.0-1.0)",
        ge=0.0,
        le=1.0,
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "reference_word": "fox",
                    "recognized_word": "box",
                    "position": 3,
                    "status": "substitution",
                    "similarity": 0.67,
                }
            ]
        },
    }

    @model_validator(mode="after")
    def words_match_status(self) -> "WordDiagnostic":
        """Ensure the present/absent words agree with the status."""
        if self.status == WordStatus.DELETION:
            if self.reference_word is None or self.recognized_word is not None:
                raise ValueError("deletion needs a reference word and no recognized word")
        elif self.status == WordStatus.INSERTION:
            if self.reference_word is not None or self.recognized_word is None:
                raise ValueError("insertion needs a recognized word and no reference word")
        elif self.status == WordStatus.CORRECT:
            if self.reference_word is None or self.recognized_word is None:
                raise ValueError("correct word needs both reference and recognized words")
        elif self.reference_word is None:
            raise ValueError("substitution needs a reference word")
        if self.similarity is not None and self.status != WordStatus.SUBSTITUTION:
            raise ValueError("similarity is only recorded for substitutions")
        return self

    @property
    def is_error(self) -> bool:
        """Whether this step counts as a mistake."""
        return self.status.is_error

    def __str__(self) -> str:
        ref = self.reference_word or "-"
        hyp = self.recognized_word or "-"
        return f"{self.status.value}@{self.position}({ref} -> {hyp})"
