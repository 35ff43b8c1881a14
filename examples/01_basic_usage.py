"""
Basic Usage Example for ShadowScore

This example demonstrates the simplest way to use ShadowScore:
1. Compare a transcript against the reference passage
2. Inspect word-level mistakes
3. Get feedback
"""

from shadowscore.core import compare, feedback, mistake_highlights


def main():
    reference = "The quick brown fox jumps over the lazy dog."
    recognized = "the quick brown box jumps over lazy dog today"

    # Step 1: Compare
    result = compare(reference, recognized)
    print(result.summary)
    print(f"Word error rate: {result.formatted_wer}\n")

    # Step 2: Word-level breakdown
    print("Words:")
    print("-" * 60)
    for d in result.diagnostics:
        ref = d.reference_word or "-"
        hyp = d.recognized_word or "-"
        line = f"{d.position:3d}  {d.status.value:<13} {ref:<10} {hyp:<10}"
        if d.similarity is not None:
            line += f" (similarity: {d.similarity:.0%})"
        print(line)

    # Step 3: Feedback
    advice = feedback(result)
    print("\n" + "=" * 60)
    print(f"Tier: {advice.tier.label}")
    print(advice.message)

    print("\nHighlights:", ", ".join(f"{w} ({s.value})" for w, s in mistake_highlights(result)))


if __name__ == "__main__":
    main()
