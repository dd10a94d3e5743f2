"""Main menu dispatcher for topics and the quiz."""

from __future__ import annotations

import logging
import random
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from interview_prep.quizzer.bank import QuestionBank
from interview_prep.quizzer.runner import run_quiz
from interview_prep.quizzer.session import InputProvider, prompt_number

from .catalog import TOPICS, Topic

_LOGGER = logging.getLogger(__name__)

QUIZ_CHOICE = len(TOPICS) + 1
EXIT_CHOICE = 0


def run_menu(
    input_provider: InputProvider,
    console: Console,
    *,
    bank: Optional[QuestionBank] = None,
    rng: Optional[random.Random] = None,
    default_count: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Loop over the main menu until the user chooses to exit."""

    log = logger or _LOGGER
    console.print(
        Text("🚀 Welcome to Java Interview Preparation App!", style="bold")
    )
    while True:
        _render_main_menu(console)
        choice = prompt_number(
            console,
            input_provider,
            EXIT_CHOICE,
            QUIZ_CHOICE,
            prompt="\nEnter your choice: ",
            logger=log,
        )
        log.debug("Main menu choice", extra={"choice": choice})
        if choice == EXIT_CHOICE:
            console.print(
                "👋 Thank you for using Java Interview Prep! "
                "Good luck with your interview!"
            )
            return 0
        if choice == QUIZ_CHOICE:
            run_quiz(
                input_provider,
                console,
                bank=bank,
                rng=rng,
                default_count=default_count,
                logger=log,
            )
        else:
            explore_topic(
                TOPICS[choice - 1], console, input_provider, logger=log
            )
        console.print()
        console.rule(style="dim")


def explore_topic(
    topic: Topic,
    console: Console,
    input_provider: InputProvider,
    *,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Show a topic submenu and print the chosen section(s)."""

    run_all = len(topic.sections) + 1
    console.print()
    console.rule(Text(topic.title, style="bold cyan"))
    for number, section in enumerate(topic.sections, start=1):
        console.print(f"{number}. {section.title}", highlight=False)
    console.print(f"{run_all}. Run all examples", highlight=False)
    choice = prompt_number(
        console,
        input_provider,
        1,
        run_all,
        prompt="Choose an example: ",
        logger=logger,
    )
    sections = (
        topic.sections if choice == run_all else (topic.sections[choice - 1],)
    )
    for section in sections:
        console.print(
            Panel(section.body, title=section.title, border_style="cyan")
        )


def _render_main_menu(console: Console) -> None:
    console.print()
    console.print(Text("📚 Choose a topic to explore:", style="bold"))
    for number, topic in enumerate(TOPICS, start=1):
        console.print(f"{number}. {topic.title}", highlight=False)
    console.print(f"{QUIZ_CHOICE}. 🧠 Take a Quiz", highlight=False)
    console.print(f"{EXIT_CHOICE}. 🚪 Exit", highlight=False)
