"""
Unit tests for the JSON session store.
"""

import json
import os
from pathlib import Path

import pytest
from shadowscore.config import ShadowScoreSettings
from shadowscore.core import compare
from shadowscore.exceptions import StoreCorruptError, StoreReadError, StoreWriteError
from shadowscore.models import PracticeMode, SessionRecord
from shadowscore.storage import SessionStore


def _record(original="the quick brown fox", recognized="the quick brown", mode=PracticeMode.READING):
    return SessionRecord.create(compare(original, recognized), mode)


class TestLoadAll:
    """Test SessionStore.load_all."""

    def test_missing_file_is_empty(self, store):
        assert not store.exists
        assert store.load_all() == []

    @pytest.mark.parametrize("content", [
        "",
        "not json at all",
        "{\"id\": 1}",
        "[{\"practice_type\": \"reading\"}]",
        "[1, 2, 3]",
    ])
    def test_corrupt_document_raises(self, store, content):
        store.path.write_text(content, encoding="utf-8")

        with pytest.raises(StoreCorruptError) as exc_info:
            store.load_all()

        assert exc_info.value.path == str(store.path)

    def test_one_bad_record_fails_whole_load(self, store):
        """Unreadable records are reported, never silently skipped."""
        good = json.loads(_record().model_dump_json())
        store.path.write_text(json.dumps([good, {"practice_type": "singing"}]), encoding="utf-8")

        with pytest.raises(StoreCorruptError):
            store.load_all()

    def test_unreadable_path_is_not_corrupt(self, tmp_path):
        """I/O failures are reported apart from parse failures."""
        store = SessionStore(tmp_path)
        with pytest.raises(StoreReadError) as exc_info:
            store.load_all()

        assert not isinstance(exc_info.value, StoreCorruptError)
        assert exc_info.value.path == str(tmp_path)

    def test_permission_error_is_read_error(self, store, monkeypatch):
        store.append(_record())

        def denied(self):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "read_bytes", denied)

        with pytest.raises(StoreReadError):
            store.load_all()

    @pytest.mark.parametrize("tamper", [
        {"correct_words": 99, "score": 10.0},
        {"score": 10.0},
        {"correct_words": 2, "deletions": 2},
        {"substitutions": 1, "correct_words": 2},
        {"word_errors": []},
    ])
    def test_inconsistent_record_is_corrupt(self, store, tamper):
        entry = json.loads(_record().model_dump_json())
        entry.update(tamper)
        store.path.write_text(json.dumps([entry]), encoding="utf-8")

        with pytest.raises(StoreCorruptError):
            store.load_all()


class TestAppend:
    """Test SessionStore.append."""

    def test_append_then_load(self, store):
        record = _record()
        store.append(record)

        loaded = store.load_all()
        assert loaded == [record]

    def test_append_keeps_previous_records(self, store):
        first = _record("hello world", "hello world")
        second = _record("good morning", "good evening", PracticeMode.SHADOWING)

        store.append(first)
        store.append(second)
        loaded = store.load_all()

        assert len(loaded) == 2
        assert loaded[-1] == second
        assert loaded[0] == first

    def test_document_format(self, store):
        record = SessionRecord.create(
            compare("the quick brown fox", "the quick brown"),
            PracticeMode.READING,
            duration=3.5,
            audio_path="file:///recordings/1.m4a",
        )
        store.append(record)

        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert isinstance(data, list)
        (entry,) = data
        assert entry["id"] == str(record.id)
        assert entry["practice_type"] == "reading"
        assert entry["score"] == 75.0
        assert entry["word_error_rate"] == 0.25
        assert entry["duration"] == 3.5
        assert entry["audio_path"] == "file:///recordings/1.m4a"
        assert entry["word_errors"] == [
            {"original_word": "fox", "user_word": None, "error_type": "deletion", "position": 3}
        ]
        assert "T" in entry["created_at"]

    def test_creates_parent_directory(self, tmp_path, settings):
        store = SessionStore(tmp_path / "nested" / "dir" / "sessions.json", settings=settings)
        store.append(_record())
        assert store.path.exists()

    def test_corrupt_store_not_overwritten(self, store):
        store.path.write_text("garbage", encoding="utf-8")

        with pytest.raises(StoreCorruptError):
            store.append(_record())

        assert store.path.read_text(encoding="utf-8") == "garbage"

    def test_write_failure_keeps_previous_document(self, store, monkeypatch):
        store.append(_record())
        before = store.path.read_bytes()

        def failing_replace(src, dst):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(os, "replace", failing_replace)

        with pytest.raises(StoreWriteError):
            store.append(_record("another attempt", "another attempt"))

        assert store.path.read_bytes() == before
        leftovers = [p for p in store.path.parent.iterdir() if p.name.endswith(".tmp")]
        assert leftovers == []

    def test_stored_record_not_rescored(self, store):
        """Stored fields are a snapshot and are loaded back verbatim."""
        record = _record()
        store.append(record)

        (loaded,) = store.load_all()
        assert loaded.score == record.score
        assert loaded.word_errors == record.word_errors
        assert loaded.created_at == record.created_at


class TestReplaceAll:
    """Test SessionStore.replace_all."""

    def test_replace_removes_records(self, store):
        keep, drop = _record("keep me", "keep me"), _record("drop me", "drop")
        store.append(keep)
        store.append(drop)

        store.replace_all(r for r in store.load_all() if r.id != drop.id)

        assert store.load_all() == [keep]

    def test_replace_with_empty(self, store):
        store.append(_record())
        store.replace_all([])

        assert store.exists
        assert store.load_all() == []


class TestStoreConfiguration:
    """Test store path resolution."""

    def test_path_from_settings(self, settings):
        assert SessionStore(settings=settings).path == settings.store_path

    def test_explicit_path_wins(self, tmp_path, settings):
        path = tmp_path / "other.json"
        assert SessionStore(path, settings=settings).path == path

    def test_compact_output(self, tmp_path):
        settings = ShadowScoreSettings(store_path=tmp_path / "s.json", store_indent=0)
        store = SessionStore(settings=settings)
        store.append(_record())

        assert "\n" not in store.path.read_text(encoding="utf-8")
