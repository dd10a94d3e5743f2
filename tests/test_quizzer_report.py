from __future__ import annotations

import pytest

from interview_prep.quizzer import (
    ErrorKind,
    QuizError,
    Tier,
    default_bank,
    render_review,
    render_summary,
    review_all,
    summarize,
)


@pytest.mark.parametrize(
    ("score", "answered", "percentage", "tier"),
    [
        (9, 10, 90.0, Tier.EXCELLENT),
        (10, 10, 100.0, Tier.EXCELLENT),
        (8, 10, 80.0, Tier.GREAT),
        (7, 10, 70.0, Tier.GOOD),
        (6, 10, 60.0, Tier.FAIR),
        (5, 10, 50.0, Tier.NEEDS_REVIEW),
        (0, 10, 0.0, Tier.NEEDS_REVIEW),
        (2, 3, 200 / 3, Tier.FAIR),
    ],
)
def test_summarize_tiers(score, answered, percentage, tier):
    summary = summarize(score, answered)

    assert summary.percentage == pytest.approx(percentage)
    assert summary.tier is tier
    assert (summary.score, summary.answered) == (score, answered)


def test_tier_labels():
    assert summarize(9, 10).tier.label == "excellent"
    assert summarize(5, 10).tier.label == "needs review"
    assert summarize(89, 100).tier.label == "great"


@pytest.mark.parametrize(("score", "answered"), [(0, 0), (3, 2), (-1, 4)])
def test_summarize_rejects_bad_arguments(score, answered):
    with pytest.raises(QuizError) as excinfo:
        summarize(score, answered)

    assert excinfo.value.kind is ErrorKind.INVALID_ARGUMENT


def test_review_all_covers_bank_in_order(small_bank):
    entries = review_all(small_bank)

    assert [entry.index for entry in entries] == [1, 2, 3, 4]
    assert entries[0].prompt == "Pick the pillar."
    assert entries[0].correct_option_text == "Encapsulation"
    assert entries[2].category == "Collections"
    assert entries[3].explanation == "Different references."


def test_review_all_is_idempotent():
    bank = default_bank()

    assert review_all(bank) == review_all(bank)
    assert len(review_all(bank)) == len(bank)


def test_render_summary_and_review(small_bank, console):
    render_summary(console, summarize(3, 4))
    render_review(console, review_all(small_bank))

    output = console.export_text()
    assert "Quiz Results" in output
    assert "3/4" in output
    assert "75.0%" in output
    assert "Good work!" in output
    assert "Question Review" in output
    assert "1. Pick the pillar." in output
    assert "Correct Answer: Vector" in output
    assert "Explanation: compile is the default." in output
