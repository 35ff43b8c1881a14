"""
Feedback generation from comparison results.
"""

from shadowscore.config import ShadowScoreSettings, get_settings
from shadowscore.models import ComparisonResult, Feedback, ScoreTier, WordStatus


HEADLINES: dict[ScoreTier, str] = {
    ScoreTier.EXCELLENT: "Excellent! Your pronunciation is very accurate.",
    ScoreTier.GOOD: "Good job! You're doing well, but there's room for improvement.",
    ScoreTier.FAIR: "Keep practicing! Focus on clear pronunciation of each word.",
    ScoreTier.NEEDS_IMPROVEMENT: "Let's work on pronunciation. Try speaking more slowly and clearly.",
}


def tier_for(accuracy: float, settings: ShadowScoreSettings | None = None) -> ScoreTier:
    """
    Map an accuracy percentage to its score tier.

    With default settings: [90, 100] excellent, [70, 90) good,
    [50, 70) fair, below 50 needs improvement.
    """
    settings = settings or get_settings()
    if accuracy >= settings.excellent_threshold:
        return ScoreTier.EXCELLENT
    if accuracy >= settings.good_threshold:
        return ScoreTier.GOOD
    if accuracy >= settings.fair_threshold:
        return ScoreTier.FAIR
    return ScoreTier.NEEDS_IMPROVEMENT


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def feedback(
    result: ComparisonResult,
    settings: ShadowScoreSettings | None = None,
) -> Feedback:
    """
    Compose guidance for a comparison result.

    The message starts with a headline chosen by tier, followed by one
    paragraph per non-zero error category (substitutions, deletions,
    insertions), separated by blank lines.

    Args:
        result: Comparison to describe
        settings: Settings providing the tier thresholds

    Returns:
        Feedback with the message and tier
    """
    tier = tier_for(result.accuracy, settings)
    parts = [HEADLINES[tier]]

    if result.substitutions > 0:
        parts.append(f"You mispronounced {_plural(result.substitutions, 'word')}.")
    if result.deletions > 0:
        parts.append(f"You missed {_plural(result.deletions, 'word')}.")
    if result.insertions > 0:
        parts.append(f"You added {_plural(result.insertions, 'extra word')}.")

    return Feedback(message="\n\n".join(parts), tier=tier)


def mistake_highlights(result: ComparisonResult) -> list[tuple[str, WordStatus]]:
    """
    List the words to highlight for each mistake, in reading order.

    Substitutions and insertions show what was said; deletions show the
    reference word that was skipped.
    """
    highlights: list[tuple[str, WordStatus]] = []
    for d in result.errors:
        if d.status == WordStatus.DELETION:
            word = d.reference_word or ""
        else:
            word = d.recognized_word or ""
        highlights.append((word, d.status))
    return highlights
