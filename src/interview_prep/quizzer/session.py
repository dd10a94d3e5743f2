"""Rich-powered quiz session controller and its state machine.

`QuizSession` holds the running score for one pass over a drawn question
sequence and enforces the ``NOT_STARTED -> IN_PROGRESS -> COMPLETED``
lifecycle. `run_session` is the synchronous console loop that presents each
question, validates the typed answer and prints feedback. Rendering and
input are injected (a Rich console and a zero-argument callable) so tests
can script whole sessions.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .bank import Question
from .errors import ErrorKind, QuizError

InputProvider = Callable[[], str]

_LOGGER = logging.getLogger(__name__)


class SessionState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class QuestionOutcome:
    """The answer given to one question and whether it was right."""

    question: Question
    selected: int
    is_correct: bool

    @property
    def selected_text(self) -> str:
        return self.question.options[self.selected - 1]


@dataclass
class QuizSession:
    """Mutable state for a single quiz run."""

    questions: Sequence[Question]
    score: int = field(default=0, init=False)
    answered: int = field(default=0, init=False)
    state: SessionState = field(
        default=SessionState.NOT_STARTED, init=False
    )
    outcomes: list[QuestionOutcome] = field(
        default_factory=list, init=False
    )

    def __post_init__(self) -> None:
        self.questions = tuple(self.questions)
        if not self.questions:
            raise QuizError(
                ErrorKind.INVALID_ARGUMENT,
                "A quiz session needs at least one question.",
            )

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def is_complete(self) -> bool:
        return self.state is SessionState.COMPLETED

    @property
    def current(self) -> Question:
        if self.state is not SessionState.IN_PROGRESS:
            raise QuizError(
                ErrorKind.INVALID_ARGUMENT,
                f"No current question while session is {self.state.value}.",
            )
        return self.questions[self.answered]

    def begin(self) -> None:
        if self.state is not SessionState.NOT_STARTED:
            raise QuizError(
                ErrorKind.INVALID_ARGUMENT,
                f"Session already {self.state.value}.",
            )
        self.state = SessionState.IN_PROGRESS

    def record(self, answer: int) -> QuestionOutcome:
        """Score ``answer`` against the current question and advance."""

        question = self.current
        if not 1 <= answer <= len(question.options):
            raise QuizError(
                ErrorKind.INVALID_ARGUMENT,
                "Answer {0} is outside 1..{1}.".format(
                    answer, len(question.options)
                ),
            )
        outcome = QuestionOutcome(
            question=question,
            selected=answer,
            is_correct=question.is_correct(answer),
        )
        if outcome.is_correct:
            self.score += 1
        self.answered += 1
        self.outcomes.append(outcome)
        if self.answered == self.total_questions:
            self.state = SessionState.COMPLETED
        return outcome


def parse_choice(raw: Optional[str], low: int, high: int) -> int:
    """Parse ``raw`` as an integer within ``[low, high]``.

    Raises a ``MALFORMED_INPUT`` :class:`QuizError` whose message is the
    re-prompt hint to show the user.
    """

    text = (raw or "").strip()
    try:
        value = int(text)
    except ValueError:
        raise QuizError(
            ErrorKind.MALFORMED_INPUT,
            f"Please enter a valid number between {low} and {high}: ",
        ) from None
    if not low <= value <= high:
        raise QuizError(
            ErrorKind.MALFORMED_INPUT,
            f"Please enter a number between {low} and {high}: ",
        )
    return value


def read_line(input_provider: InputProvider) -> str:
    """Return one line from ``input_provider``; closed input is an error."""

    try:
        return input_provider()
    except (EOFError, StopIteration):
        raise QuizError(
            ErrorKind.INPUT_EXHAUSTED, "Input closed before an answer."
        ) from None


def prompt_number(
    console: Console,
    input_provider: InputProvider,
    low: int,
    high: int,
    *,
    prompt: str,
    default: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Prompt until the user enters an integer in ``[low, high]``.

    An empty line returns ``default`` when one is given.
    """

    log = logger or _LOGGER
    console.print(prompt, end="", markup=False, highlight=False)
    while True:
        raw = read_line(input_provider)
        if default is not None and not raw.strip():
            return default
        try:
            return parse_choice(raw, low, high)
        except QuizError as exc:
            log.debug(
                "Rejected input",
                extra={
                    "kind": exc.kind.value,
                    "raw": raw,
                    "range": [low, high],
                },
            )
            console.print(
                Text(f"❌ {exc}", style="red"), end="", highlight=False
            )


def run_session(
    session: QuizSession,
    console: Console,
    input_provider: InputProvider,
    *,
    logger: Optional[logging.Logger] = None,
) -> QuizSession:
    """Ask every question in ``session`` and return it completed."""

    log = logger or _LOGGER
    session.begin()
    while not session.is_complete:
        question = session.current
        position = session.answered + 1
        _render_question(console, question, position, session.total_questions)
        answer = prompt_number(
            console,
            input_provider,
            1,
            len(question.options),
            prompt=f"\nYour answer (1-{len(question.options)}): ",
            logger=log,
        )
        outcome = session.record(answer)
        log.info(
            "Answered question",
            extra={
                "position": position,
                "category": question.category,
                "difficulty": question.difficulty,
                "selected": answer,
                "correct": outcome.is_correct,
            },
        )
        _render_feedback(console, outcome)
    return session


def _render_question(
    console: Console, question: Question, position: int, total: int
) -> None:
    console.print()
    console.rule(
        Text.assemble(
            (f"Question {position}", "bold cyan"),
            (f" of {total}", "dim"),
        )
    )
    console.print(
        Text.assemble(("Category: ", "bold"), question.category),
        highlight=False,
    )
    console.print(
        Text.assemble(("Difficulty: ", "bold"), question.difficulty),
        highlight=False,
    )
    console.print(Text(question.prompt, style="bold"))

    table = Table(show_header=False, box=box.SIMPLE, expand=True)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Option", overflow="fold")
    for number, option in enumerate(question.options, start=1):
        table.add_row(f"{number}.", Text(option))
    console.print(table)


def _render_feedback(console: Console, outcome: QuestionOutcome) -> None:
    question = outcome.question
    if outcome.is_correct:
        console.print(
            Text.assemble(("✅ Correct! ", "bold green"), question.explanation)
        )
    else:
        console.print(
            Text.assemble(
                ("❌ Incorrect. ", "bold red"),
                "The correct answer is: ",
                (question.correct_option, "bold"),
            )
        )
        console.print(
            Text.assemble(("💡 Explanation: ", "yellow"), question.explanation)
        )
    console.rule(style="dim")
