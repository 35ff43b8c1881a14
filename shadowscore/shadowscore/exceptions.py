"""
Exception hierarchy for ShadowScore library.

Tokenizing, aligning and scoring never raise; everything fallible lives in
the session store and in transcription collaborators.
"""

from pathlib import Path


class ShadowScoreError(Exception):
    """Base class for all ShadowScore errors."""


# ============ Storage ============


class StoreError(ShadowScoreError):
    """Base class for session store failures."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class StoreReadError(StoreError):
    """The session document exists but could not be read from disk."""


class StoreCorruptError(StoreError):
    """The persisted session document could not be parsed."""


class StoreWriteError(StoreError):
    """Rewriting the session document failed; the previous file is intact."""


# ============ Transcription ============


class TranscriptionError(ShadowScoreError):
    """The speech recognizer could not produce a transcript."""


class ModelNotLoadedError(TranscriptionError):
    """Transcription was requested before the model was loaded."""

    def __init__(self, message: str = "Model not loaded. Call load() first."):
        super().__init__(message)


class AudioFileError(TranscriptionError):
    """The audio artifact handed to a transcriber is unusable."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
