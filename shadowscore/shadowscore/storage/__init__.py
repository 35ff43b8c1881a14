"""
Persistence for practice session records.
"""

from shadowscore.storage.store import SessionStore

__all__ = ["SessionStore"]
