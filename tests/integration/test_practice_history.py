"""
Integration tests for ShadowScore library.
These tests run whole practice sessions against a store on disk.
"""

import pytest
from shadowscore import PracticeMode, ScoreTier, SessionStore, evaluate_attempt


PASSAGE = (
    "Every morning she walks along the river, listening to the birds "
    "and thinking about the day ahead."
)


@pytest.mark.integration
class TestPracticeHistory:
    """Multiple attempts accumulate in one store file."""

    @pytest.mark.parametrize("recognized,expected_tier", [
        ("every morning she walks along the river listening to the birds and thinking about the day ahead",
         ScoreTier.EXCELLENT),
        ("every morning she walks along the river listening to birds thinking about a day",
         ScoreTier.GOOD),
        ("morning she walk river birds day", ScoreTier.NEEDS_IMPROVEMENT),
    ])
    def test_tiers_for_passage(self, recognized, expected_tier):
        outcome = evaluate_attempt(PASSAGE, recognized, PracticeMode.READING)
        assert outcome.feedback.tier == expected_tier

    def test_history_survives_reopen(self, settings):
        attempts = [
            ("every morning she walks along the river", PracticeMode.READING),
            ("every morning she walk along a river listening", PracticeMode.SHADOWING),
            (PASSAGE, PracticeMode.SHADOWING),
        ]

        records = []
        for recognized, mode in attempts:
            # A fresh instance per attempt, like separate app launches
            store = SessionStore(settings=settings)
            records.append(evaluate_attempt(PASSAGE, recognized, mode, store=store).record)

        history = SessionStore(settings=settings).load_all()

        assert [r.id for r in history] == [r.id for r in records]
        assert history[-1].score == 100.0
        assert history[0].deletions > 0
        assert {r.practice_type for r in history} == {PracticeMode.READING, PracticeMode.SHADOWING}
