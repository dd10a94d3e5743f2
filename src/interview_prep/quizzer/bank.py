"""Immutable question model and the question bank that owns it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from .errors import ErrorKind, QuizError


class Difficulty(Enum):
    """Supported difficulty tags."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def from_value(cls, value: str) -> "Difficulty":
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        expected = ", ".join(member.value for member in cls)
        raise QuizError(
            ErrorKind.INVALID_QUESTION_DATA,
            f"Unknown difficulty '{value}'. Expected one of: {expected}.",
        )


@dataclass(frozen=True, eq=False)
class Question:
    """A single multiple-choice question.

    ``correct_index`` is 1-based, matching the option numbers shown to the
    user. Equality is identity so two questions with identical text stay
    distinct when drawn.
    """

    category: str
    difficulty: str
    prompt: str
    options: tuple[str, ...]
    correct_index: int
    explanation: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", tuple(self.options))

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index - 1]

    def is_correct(self, answer: int) -> bool:
        return answer == self.correct_index


class QuestionBank:
    """Ordered, read-only collection of validated questions."""

    def __init__(self, questions: Iterable[Question]) -> None:
        items = tuple(questions)
        if not items:
            raise QuizError(
                ErrorKind.INVALID_QUESTION_DATA,
                "Question bank must contain at least one question.",
            )
        for position, question in enumerate(items, start=1):
            _validate_question(question, position)
        self._questions = items

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def size(self) -> int:
        return len(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]

    def categories(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for question in self._questions:
            seen.setdefault(question.category, None)
        return tuple(seen)

    def by_category(self, category: str) -> tuple[Question, ...]:
        return tuple(q for q in self._questions if q.category == category)


def make_question(
    category: str,
    difficulty: str,
    prompt: str,
    options: Iterable[str],
    correct_index: int,
    explanation: str,
) -> Question:
    """Build a :class:`Question`, normalizing difficulty and options."""

    return Question(
        category=category,
        difficulty=Difficulty.from_value(difficulty).value,
        prompt=prompt,
        options=tuple(str(option) for option in options),
        correct_index=correct_index,
        explanation=explanation,
    )


def default_bank() -> QuestionBank:
    """Return the bundled Java and Maven question bank."""

    from .catalog import DEFAULT_QUESTIONS

    return QuestionBank(DEFAULT_QUESTIONS)


def _validate_question(question: Question, position: int) -> None:
    label = f"Question {position} ({question.category})"
    try:
        Difficulty.from_value(question.difficulty)
    except QuizError as exc:
        raise QuizError(exc.kind, f"{label}: {exc}") from None
    if len(question.options) < 2:
        raise QuizError(
            ErrorKind.INVALID_QUESTION_DATA,
            f"{label} must define at least two options.",
        )
    index = question.correct_index
    if isinstance(index, bool) or not isinstance(index, int):
        raise QuizError(
            ErrorKind.INVALID_QUESTION_DATA,
            f"{label} has a non-integer correct index: {index!r}.",
        )
    if not 1 <= index <= len(question.options):
        raise QuizError(
            ErrorKind.INVALID_QUESTION_DATA,
            "{0} correct index {1} is outside 1..{2}.".format(
                label, index, len(question.options)
            ),
        )
