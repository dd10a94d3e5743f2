"""Entry point that wires the bank, selector, session and report together."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.text import Text

from .bank import QuestionBank, default_bank
from .report import (
    Summary,
    render_review,
    render_summary,
    review_all,
    summarize,
)
from .selector import draw
from .session import (
    InputProvider,
    QuizSession,
    prompt_number,
    read_line,
    run_session,
)

_LOGGER = logging.getLogger(__name__)

_YES = {"y", "yes"}


@dataclass(frozen=True)
class QuizRunResult:
    """Return value from ``run_quiz``."""

    session: QuizSession
    summary: Summary
    reviewed: bool


def run_quiz(
    input_provider: InputProvider,
    console: Console,
    *,
    bank: Optional[QuestionBank] = None,
    rng: Optional[random.Random] = None,
    count: Optional[int] = None,
    default_count: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> QuizRunResult:
    """Run one complete quiz: choose a size, ask, score, optionally review.

    A preset ``count`` skips the size prompt and is validated by ``draw``.
    Otherwise ``default_count`` is accepted on an empty answer to the size
    prompt, clamped to the bank size so a stale config never blocks the quiz.
    """

    log = logger or _LOGGER
    active_bank = bank if bank is not None else default_bank()
    size = len(active_bank)

    _render_intro(console)
    if count is None:
        count = _ask_count(console, input_provider, size, default_count, log)

    questions = draw(active_bank, count, rng=rng)
    log.info(
        "Starting quiz",
        extra={"bank_size": size, "question_count": count},
    )
    console.print(
        Text(f"\n🎯 Starting Quiz with {count} questions...", style="bold")
    )

    session = run_session(
        QuizSession(questions), console, input_provider, logger=log
    )
    summary = summarize(session.score, session.answered)
    log.info(
        "Quiz completed",
        extra={
            "score": summary.score,
            "answered": summary.answered,
            "percentage": summary.percentage,
            "tier": summary.tier.label,
        },
    )
    render_summary(console, summary)

    console.print(
        "\nWould you like to review all questions? (y/n): ",
        end="",
        markup=False,
        highlight=False,
    )
    reviewed = read_line(input_provider).strip().lower() in _YES
    if reviewed:
        render_review(console, review_all(active_bank))
    return QuizRunResult(session=session, summary=summary, reviewed=reviewed)


def _render_intro(console: Console) -> None:
    console.print()
    console.rule(Text("🧠 Java & Maven Quiz", style="bold cyan"))
    console.print("Test your knowledge with these interview-style questions!")
    console.print(
        "Each question has multiple choice answers. Choose the best option."
    )


def _ask_count(
    console: Console,
    input_provider: InputProvider,
    size: int,
    default_count: Optional[int],
    logger: logging.Logger,
) -> int:
    fallback = min(default_count, size) if default_count else None
    hint = f" [{fallback}]" if fallback else ""
    return prompt_number(
        console,
        input_provider,
        1,
        size,
        prompt=(
            f"\nHow many questions would you like to answer? "
            f"(1-{size}){hint}: "
        ),
        default=fallback,
        logger=logger,
    )
