from .bank import (
    Difficulty,
    Question,
    QuestionBank,
    default_bank,
    make_question,
)
from .errors import ErrorKind, QuizError
from .report import (
    ReviewEntry,
    Summary,
    Tier,
    render_review,
    render_summary,
    review_all,
    summarize,
)
from .runner import QuizRunResult, run_quiz
from .selector import draw, make_rng
from .session import (
    InputProvider,
    QuestionOutcome,
    QuizSession,
    SessionState,
    parse_choice,
    prompt_number,
    run_session,
)

__all__ = [
    "Difficulty",
    "Question",
    "QuestionBank",
    "default_bank",
    "make_question",
    "ErrorKind",
    "QuizError",
    "ReviewEntry",
    "Summary",
    "Tier",
    "render_review",
    "render_summary",
    "review_all",
    "summarize",
    "QuizRunResult",
    "run_quiz",
    "draw",
    "make_rng",
    "InputProvider",
    "QuestionOutcome",
    "QuizSession",
    "SessionState",
    "parse_choice",
    "prompt_number",
    "run_session",
]
