"""Score summaries, feedback tiers and the full question review."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .bank import QuestionBank
from .errors import ErrorKind, QuizError


class Tier(Enum):
    """Feedback tiers ordered from best to worst."""

    EXCELLENT = ("excellent", 90.0)
    GREAT = ("great", 80.0)
    GOOD = ("good", 70.0)
    FAIR = ("fair", 60.0)
    NEEDS_REVIEW = ("needs review", 0.0)

    def __init__(self, label: str, threshold: float) -> None:
        self.label = label
        self.threshold = threshold

    @property
    def message(self) -> str:
        return _TIER_MESSAGES[self]

    @classmethod
    def for_percentage(cls, percentage: float) -> "Tier":
        for tier in cls:
            if percentage >= tier.threshold:
                return tier
        return cls.NEEDS_REVIEW


_TIER_MESSAGES = {
    Tier.EXCELLENT: "🏆 Excellent! You're well-prepared for Java interviews!",
    Tier.GREAT: "🎯 Great job! You have solid Java knowledge.",
    Tier.GOOD: "👍 Good work! Keep studying to improve further.",
    Tier.FAIR: "📚 Not bad! Focus on the areas you missed.",
    Tier.NEEDS_REVIEW: (
        "📖 Keep studying! Review the concepts you struggled with."
    ),
}


@dataclass(frozen=True)
class Summary:
    """Final score snapshot for a completed session."""

    score: int
    answered: int
    percentage: float
    tier: Tier


@dataclass(frozen=True)
class ReviewEntry:
    """One line of the full-bank review listing."""

    index: int
    prompt: str
    category: str
    correct_option_text: str
    explanation: str


def summarize(score: int, answered: int) -> Summary:
    """Return the percentage and tier for ``score`` out of ``answered``."""

    if answered <= 0:
        raise QuizError(
            ErrorKind.INVALID_ARGUMENT,
            f"Cannot summarize a quiz with {answered} answered questions.",
        )
    if not 0 <= score <= answered:
        raise QuizError(
            ErrorKind.INVALID_ARGUMENT,
            f"Score {score} is outside 0..{answered}.",
        )
    percentage = 100.0 * score / answered
    return Summary(
        score=score,
        answered=answered,
        percentage=percentage,
        tier=Tier.for_percentage(percentage),
    )


def review_all(bank: QuestionBank) -> tuple[ReviewEntry, ...]:
    """List every bank question with its correct answer, in bank order."""

    return tuple(
        ReviewEntry(
            index=index,
            prompt=question.prompt,
            category=question.category,
            correct_option_text=question.correct_option,
            explanation=question.explanation,
        )
        for index, question in enumerate(bank, start=1)
    )


def render_summary(console: Console, summary: Summary) -> None:
    console.print()
    console.rule(Text("📊 Quiz Results", style="bold magenta"))

    overview = Table(
        show_header=False,
        box=box.MINIMAL_DOUBLE_HEAD,
        expand=False,
    )
    overview.add_column("Metric", style="bold")
    overview.add_column("Value", justify="right")
    overview.add_row("Score", f"{summary.score}/{summary.answered}")
    overview.add_row("Percentage", f"{summary.percentage:.1f}%")
    console.print(overview)
    console.print(Text(summary.tier.message, style="bold"))


def render_review(console: Console, entries: Sequence[ReviewEntry]) -> None:
    console.print()
    console.rule(Text("📖 Question Review", style="bold magenta"))
    for entry in entries:
        console.print()
        console.print(Text(f"{entry.index}. {entry.prompt}", style="bold"))
        console.print(
            Text.assemble(("Category: ", "dim"), entry.category),
            highlight=False,
        )
        console.print(
            Text.assemble(
                ("Correct Answer: ", "green"), entry.correct_option_text
            ),
            highlight=False,
        )
        console.print(
            Text.assemble(("Explanation: ", "yellow"), entry.explanation),
            highlight=False,
        )
        console.rule(style="dim")
