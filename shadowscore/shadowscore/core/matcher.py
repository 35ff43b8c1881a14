"""
Character-level similarity between words.

Used to tell near misses ("fox" spoken as "box") apart from completely
different words inside substitutions. Never affects word error rate.

Uses SIMD-accelerated rapidfuzz for fast string matching.
"""

from rapidfuzz.distance import Indel as _rapidfuzz_indel


def similarity(text1: str, text2: str) -> float:
    """
    Compute similarity ratio between two strings.

    Returns a ratio between 0.0 (no similarity) and 1.0 (identical strings).

    Args:
        text1: First string to compare
        text2: Second string to compare

    Returns:
        Similarity ratio between 0.0 and 1.0

    Examples:
        >>> similarity("fox", "fox")
        1.0
        >>> round(similarity("fox", "box"), 2)
        0.67
    """
    return _rapidfuzz_indel.normalized_similarity(text1, text2)

