"""Error kinds raised by the quiz engine."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Tag carried by every :class:`QuizError`."""

    INVALID_ARGUMENT = "invalid_argument"
    MALFORMED_INPUT = "malformed_input"
    INVALID_QUESTION_DATA = "invalid_question_data"
    INPUT_EXHAUSTED = "input_exhausted"


class QuizError(RuntimeError):
    """Raised by quiz operations; branch on :attr:`kind`, not subclasses."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"QuizError({self.kind.name}, {str(self)!r})"
