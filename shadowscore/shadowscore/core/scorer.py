"""
Scoring of word alignments.

Turns diagnostics into counts, word error rate and accuracy. Pure
functions without shared state, safe to call from any thread.
"""

import logging
from collections import Counter
from typing import Sequence

from shadowscore.core.aligner import align_words
from shadowscore.core.tokenizer import tokenize
from shadowscore.models import ComparisonResult, WordDiagnostic, WordStatus

logger = logging.getLogger(__name__)


def word_error_rate(distance: int, reference_length: int) -> float:
    """
    Word error rate for an edit distance over a reference of given length.

    An empty reference yields 0.0 whatever the distance, so speaking into an
    empty passage scores as perfect.
    """
    if reference_length == 0:
        return 0.0
    return distance / reference_length


def accuracy_from_wer(wer: float) -> float:
    """Accuracy percentage ``(1 - wer) * 100`` clamped to [0, 100]."""
    return max(0.0, min(100.0, (1.0 - wer) * 100.0))


def score(
    reference: Sequence[str],
    diagnostics: Sequence[WordDiagnostic],
    distance: int,
    *,
    original_text: str = "",
    recognized_text: str = "",
) -> ComparisonResult:
    """
    Build a comparison result from an alignment.

    Args:
        reference: Reference tokens
        diagnostics: Diagnostics in reading order, as produced by ``backtrace``
        distance: Edit distance of the alignment
        original_text: Raw reference text to keep on the result
        recognized_text: Raw transcript to keep on the result

    Returns:
        Immutable ComparisonResult
    """
    counts = Counter(d.status for d in diagnostics)
    wer = word_error_rate(distance, len(reference))

    return ComparisonResult(
        original_text=original_text,
        recognized_text=recognized_text,
        diagnostics=tuple(diagnostics),
        total_words=len(reference),
        correct_words=counts[WordStatus.CORRECT],
        substitutions=counts[WordStatus.SUBSTITUTION],
        deletions=counts[WordStatus.DELETION],
        insertions=counts[WordStatus.INSERTION],
        word_error_rate=wer,
        accuracy=accuracy_from_wer(wer),
    )


def compare(original: str, recognized: str) -> ComparisonResult:
    """
    Compare a recognized transcript against a reference text.

    Runs the full pipeline: tokenize both texts, align them word by word,
    reconstruct diagnostics and score.

    Args:
        original: Reference text the user was asked to say
        recognized: Final transcript from the speech recognizer

    Returns:
        ComparisonResult with word diagnostics, word error rate and accuracy

    Examples:
        >>> compare("The quick brown fox", "the quick brown").accuracy
        75.0
    """
    reference_tokens = tokenize(original)
    recognized_tokens = tokenize(recognized)

    distance, diagnostics = align_words(reference_tokens, recognized_tokens)
    result = score(
        reference_tokens,
        diagnostics,
        distance,
        original_text=original,
        recognized_text=recognized,
    )

    logger.debug(
        "Compared %d reference / %d recognized words: distance=%d accuracy=%.1f",
        len(reference_tokens), len(recognized_tokens), distance, result.accuracy,
    )
    return result
