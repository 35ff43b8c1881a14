"""
Text normalization and tokenization.

Reference passages and recognized transcripts are reduced to the same
lexical form before comparison: lowercase ASCII letters and digits only.
"""

import re

# Anything that is not a lowercase ASCII letter, a digit or whitespace
_NON_TOKEN_CHARS = re.compile(r"[^a-z0-9\s]")


def normalize_text(text: str) -> str:
    """
    Lowercase text and strip every character outside ``[a-z0-9]`` and whitespace.

    Punctuation and non-ASCII script are discarded, so the comparison is
    purely lexical.

    Examples:
        >>> normalize_text("Hello, World!")
        'hello world'
        >>> normalize_text("Don't stop")
        'dont stop'
    """
    if not text:
        return ""
    return _NON_TOKEN_CHARS.sub("", text.lower())


def tokenize(text: str) -> list[str]:
    """
    Split text into normalized word tokens.

    Args:
        text: Raw reference or recognized text

    Returns:
        Ordered list of tokens; empty for empty or punctuation-only input

    Examples:
        >>> tokenize("The quick, brown fox.")
        ['the', 'quick', 'brown', 'fox']
        >>> tokenize("   ")
        []
    """
    return normalize_text(text).split()

