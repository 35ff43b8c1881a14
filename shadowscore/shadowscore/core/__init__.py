"""
Core modules for ShadowScore library.

This package contains the core business logic for:
- Tokenizing reference and recognized text
- Word-level edit-distance alignment
- Scoring and feedback

Primary API:
    from shadowscore.core import compare, feedback

    result = compare("The quick brown fox", "the quick brown")
    print(result.accuracy)          # 75.0
    print(feedback(result).message)
"""

# Primary API - what most users need
from shadowscore.core.scorer import compare, score
from shadowscore.core.guidance import feedback, tier_for, mistake_highlights

# Building blocks
from shadowscore.core.tokenizer import tokenize, normalize_text
from shadowscore.core.aligner import Alignment, EditOperation, align, backtrace
from shadowscore.core.matcher import similarity

__all__ = [
    # Primary API
    "compare",
    "score",
    "feedback",
    "tier_for",
    "mistake_highlights",
    # Building blocks
    "tokenize",
    "normalize_text",
    "Alignment",
    "EditOperation",
    "align",
    "backtrace",
    "similarity",
]
