"""
Transcription collaborator interface.
"""

from shadowscore.transcription.base import BaseTranscriber

__all__ = ["BaseTranscriber"]
