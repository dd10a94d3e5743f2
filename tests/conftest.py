from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterator, Sequence

import pytest
from rich.console import Console

TESTS_DIR = Path(__file__).resolve().parent
ROOT = TESTS_DIR.parent
for extra in (ROOT, ROOT / "src"):
    path_str = str(extra)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from interview_prep.core.logging import release_logger  # noqa: E402
from interview_prep.quizzer.bank import (  # noqa: E402
    QuestionBank,
    make_question,
)


def make_provider(lines: Sequence[str]) -> Callable[[], str]:
    iterator = iter(lines)

    def _provider() -> str:
        return next(iterator)

    return _provider


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=120, force_terminal=True)


@pytest.fixture
def small_bank() -> QuestionBank:
    return QuestionBank(
        [
            make_question(
                "OOP",
                "Easy",
                "Pick the pillar.",
                ["Recursion", "Encapsulation", "Looping", "Hashing"],
                2,
                "Encapsulation is a pillar.",
            ),
            make_question(
                "Maven",
                "Medium",
                "Default scope?",
                ["test", "compile"],
                2,
                "compile is the default.",
            ),
            make_question(
                "Collections",
                "Hard",
                "Thread-safe list?",
                ["ArrayList", "Vector", "LinkedList"],
                2,
                "Vector is synchronized.",
            ),
            make_question(
                "OOP",
                "Hard",
                "s1 == s2 for two new Strings?",
                ["true", "false"],
                2,
                "Different references.",
            ),
        ]
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "INTERVIEW_PREP_DATA_HOME",
        "INTERVIEW_PREP_CONFIG",
        "INTERVIEW_PREP_DEFAULT_QUESTIONS",
        "INTERVIEW_PREP_SEED",
        "INTERVIEW_PREP_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _release_cli_logger() -> Iterator[None]:
    yield
    release_logger(logging.getLogger("interview_prep.quizzer"))
