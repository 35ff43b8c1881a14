"""
Practice History Example for ShadowScore

Scores several attempts, appends each to a JSON store and prints the
history the way a progress screen would.
"""

import logging

from shadowscore import PracticeMode, SessionStore, StoreError, evaluate_attempt

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


def main():
    passage = "She sells sea shells by the sea shore."
    attempts = [
        ("she sells see shells by the shore", PracticeMode.READING, 3.1),
        ("she sells sea shells by the sea shore", PracticeMode.SHADOWING, 2.8),
    ]

    store = SessionStore("practice_sessions.json")

    for recognized, mode, duration in attempts:
        try:
            outcome = evaluate_attempt(passage, recognized, mode, duration=duration, store=store)
        except StoreError as e:
            print(f"Could not save attempt: {e}")
            return
        print(outcome.feedback.message)
        print()

    print("History:")
    print("-" * 60)
    for record in store.load_all():
        print(f"{record.created_at:%Y-%m-%d %H:%M}  {record.practice_type.value:<10} "
              f"{record.formatted_score:>5}  {record.formatted_duration or '-':>5}  "
              f"{record.error_summary}")


if __name__ == "__main__":
    main()
