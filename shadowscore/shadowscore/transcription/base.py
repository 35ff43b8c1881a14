"""
Speech-to-text collaborator contract.

ShadowScore does not ship a recognizer. Applications plug in their own
engine by subclassing ``BaseTranscriber``; the scoring pipeline only ever
sees the final transcript string.
"""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path


class BaseTranscriber(ABC):
    """
    Base class for transcribers producing a single final transcript.

    Example:
        with MyTranscriber() as transcriber:
            text = transcriber.transcribe("attempt.m4a")

    Implementations raise ``AudioFileError`` for unusable audio and
    ``TranscriptionError`` when recognition fails.
    """

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether the recognizer is ready."""

    @abstractmethod
    def load(self) -> None:
        """Prepare the recognizer (load models, open sessions)."""

    @abstractmethod
    def unload(self) -> None:
        """Release recognizer resources."""

    @abstractmethod
    def transcribe(self, audio_path: str | Path) -> str:
        """
        Transcribe a complete recording.

        Args:
            audio_path: Path to the recording

        Returns:
            Final transcript text (never a partial result)
        """

    async def transcribe_async(self, audio_path: str | Path) -> str:
        """
        Transcribe without blocking the event loop.

        Runs ``transcribe`` in the default executor.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.transcribe, audio_path)

    def __enter__(self) -> "BaseTranscriber":
        self.load()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.unload()
