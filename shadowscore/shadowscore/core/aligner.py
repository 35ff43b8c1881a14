"""
Word-level edit-distance alignment.

Classic Wagner-Fischer dynamic programming over two token sequences with
unit cost per substitution, deletion and insertion, plus a full backtrace
that turns the operation matrix into word diagnostics.

When several operations reach the same minimum cost the choice is always
substitute, then delete, then insert. Diagnostics depend on that order, so
identical inputs always produce identical breakdowns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..models import WordDiagnostic, WordStatus
from .matcher import similarity


class EditOperation(str, Enum):
    """Operation recorded for one cell of the backtrace matrix."""

    MATCH = "match"
    SUBSTITUTE = "substitute"
    DELETE = "delete"  # reference word missing from the transcript
    INSERT = "insert"  # transcript word missing from the reference


@dataclass(frozen=True)
class Alignment:
    """
    Result of aligning a reference against a recognized token sequence.

    Attributes:
        distance: Minimum number of word edits
        operations: ``(len(reference) + 1) x (len(recognized) + 1)`` matrix;
            ``operations[i][j]`` is the last step of the cheapest path that
            aligns ``reference[:i]`` with ``recognized[:j]``
    """

    distance: int
    operations: list[list[EditOperation]]

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.operations), len(self.operations[0])


# ---------------------------------------------------------------------------
# 1. Cost and operation matrices
# ---------------------------------------------------------------------------

def align(reference: Sequence[str], recognized: Sequence[str]) -> Alignment:
    """
    Compute the minimum word edit distance and its operation matrix.

    Args:
        reference: Reference tokens
        recognized: Recognized tokens

    Returns:
        Alignment holding the distance and backtrace matrix

    Examples:
        >>> align(["the", "quick", "fox"], ["the", "fox"]).distance
        1
    """
    n, m = len(reference), len(recognized)

    dist = [[0] * (m + 1) for _ in range(n + 1)]
    ops = [[EditOperation.MATCH] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        dist[i][0] = i
        ops[i][0] = EditOperation.DELETE
    for j in range(1, m + 1):
        dist[0][j] = j
        ops[0][j] = EditOperation.INSERT

    for i in range(1, n + 1):
        ref_word = reference[i - 1]
        for j in range(1, m + 1):
            if ref_word == recognized[j - 1]:
                dist[i][j] = dist[i - 1][j - 1]
                ops[i][j] = EditOperation.MATCH
                continue

            sub_cost = dist[i - 1][j - 1] + 1
            del_cost = dist[i - 1][j] + 1
            ins_cost = dist[i][j - 1] + 1

            # Tie-break: substitute <= delete <= insert
            if sub_cost <= del_cost and sub_cost <= ins_cost:
                dist[i][j] = sub_cost
                ops[i][j] = EditOperation.SUBSTITUTE
            elif del_cost <= ins_cost:
                dist[i][j] = del_cost
                ops[i][j] = EditOperation.DELETE
            else:
                dist[i][j] = ins_cost
                ops[i][j] = EditOperation.INSERT

    return Alignment(distance=dist[n][m], operations=ops)


# ---------------------------------------------------------------------------
# 2. Backtrace
# ---------------------------------------------------------------------------

def backtrace(
    reference: Sequence[str],
    recognized: Sequence[str],
    operations: list[list[EditOperation]],
) -> list[WordDiagnostic]:
    """
    Reconstruct word diagnostics from an operation matrix.

    Walks from the bottom-right cell back to the origin and returns the
    steps in reading order (left to right).

    Args:
        reference: Reference tokens used to build ``operations``
        recognized: Recognized tokens used to build ``operations``
        operations: Matrix returned by ``align``

    Returns:
        Diagnostics in reading order
    """
    diagnostics: list[WordDiagnostic] = []
    i, j = len(reference), len(recognized)

    while i > 0 or j > 0:
        op = operations[i][j]

        if op == EditOperation.MATCH:
            diagnostics.append(WordDiagnostic(
                reference_word=reference[i - 1],
                recognized_word=recognized[j - 1],
                position=i - 1,
                status=WordStatus.CORRECT,
            ))
            i -= 1
            j -= 1

        elif op == EditOperation.SUBSTITUTE:
            ref_word = reference[i - 1]
            hyp_word = recognized[j - 1] if j > 0 else None
            diagnostics.append(WordDiagnostic(
                reference_word=ref_word,
                recognized_word=hyp_word,
                position=i - 1,
                status=WordStatus.SUBSTITUTION,
                similarity=similarity(ref_word, hyp_word) if hyp_word is not None else None,
            ))
            i -= 1
            j -= 1

        elif op == EditOperation.DELETE:
            diagnostics.append(WordDiagnostic(
                reference_word=reference[i - 1],
                recognized_word=None,
                position=i - 1,
                status=WordStatus.DELETION,
            ))
            i -= 1

        else:  # INSERT
            diagnostics.append(WordDiagnostic(
                reference_word=None,
                recognized_word=recognized[j - 1],
                position=i,
                status=WordStatus.INSERTION,
            ))
            j -= 1

    diagnostics.reverse()
    return diagnostics


def align_words(
    reference: Sequence[str], recognized: Sequence[str]
) -> tuple[int, list[WordDiagnostic]]:
    """
    Align two token sequences and return ``(distance, diagnostics)``.

    Convenience wrapper around ``align`` followed by ``backtrace``.
    """
    alignment = align(reference, recognized)
    return alignment.distance, backtrace(reference, recognized, alignment.operations)
