"""
Pydantic data models for ShadowScore library.

These models represent the core data structures used throughout the library:
- WordDiagnostic: One aligned step between reference and recognized words
- ComparisonResult: Diagnostics plus word error rate and accuracy
- Feedback: Guidance message and score tier
- SessionRecord: The persisted record of a practice attempt
"""

from shadowscore.models.diagnostic import WordDiagnostic, WordStatus
from shadowscore.models.result import ComparisonResult
from shadowscore.models.feedback import Feedback, ScoreTier
from shadowscore.models.session import PracticeMode, SessionRecord, WordError

__all__ = [
    "WordDiagnostic",
    "WordStatus",
    "ComparisonResult",
    "Feedback",
    "ScoreTier",
    "PracticeMode",
    "SessionRecord",
    "WordError",
]
