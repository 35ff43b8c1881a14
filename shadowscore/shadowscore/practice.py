"""
End-to-end evaluation of a practice attempt.

Reference text and final transcript go in; a comparison, feedback and a
new session record come out, optionally appended to a store.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from shadowscore.core.guidance import feedback as make_feedback
from shadowscore.core.scorer import compare
from shadowscore.models import ComparisonResult, Feedback, PracticeMode, SessionRecord
from shadowscore.storage import SessionStore
from shadowscore.transcription import BaseTranscriber

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PracticeOutcome:
    """Everything one practice attempt produces."""

    result: ComparisonResult
    feedback: Feedback
    record: SessionRecord


def evaluate_attempt(
    original: str,
    recognized: str,
    practice_type: PracticeMode | str,
    *,
    duration: float | None = None,
    audio_path: str | Path | None = None,
    store: SessionStore | None = None,
) -> PracticeOutcome:
    """
    Score a completed attempt and record it.

    Args:
        original: Reference text
        recognized: Final transcript
        practice_type: Reading or shadowing
        duration: Recording length in seconds
        audio_path: Recording location, stored verbatim
        store: Store to append the new record to (skipped when None)

    Returns:
        PracticeOutcome with the comparison, feedback and record

    Raises:
        StoreReadError: The store exists but cannot be read
        StoreCorruptError: The store cannot be parsed
        StoreWriteError: The store could not be rewritten
    """
    result = compare(original, recognized)
    advice = make_feedback(result)
    record = SessionRecord.create(
        result,
        practice_type,
        duration=duration,
        audio_path=str(audio_path) if audio_path is not None else None,
    )

    if store is not None:
        store.append(record)

    logger.info(
        "Evaluated %s attempt %s: %s (%s)",
        record.practice_type.value, record.id, result.formatted_accuracy, advice.tier.value,
    )
    return PracticeOutcome(result=result, feedback=advice, record=record)


async def evaluate_recording(
    transcriber: BaseTranscriber,
    audio_path: str | Path,
    original: str,
    practice_type: PracticeMode | str,
    *,
    duration: float | None = None,
    store: SessionStore | None = None,
) -> PracticeOutcome:
    """
    Transcribe a finished recording, then score it like ``evaluate_attempt``.

    Transcription errors propagate unchanged; nothing is scored or stored
    when the recognizer fails. Scoring and the store append run in the
    default executor so file I/O stays off the event loop.
    """
    recognized = await transcriber.transcribe_async(audio_path)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        partial(
            evaluate_attempt,
            original,
            recognized,
            practice_type,
            duration=duration,
            audio_path=audio_path,
            store=store,
        ),
    )
