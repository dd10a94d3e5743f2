"""Random question selection without replacement."""

from __future__ import annotations

import random
from typing import Optional

from .bank import Question, QuestionBank
from .errors import ErrorKind, QuizError


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a ``random.Random``; ``None`` seeds from OS entropy."""

    return random.Random(seed)


def draw(
    bank: QuestionBank,
    count: int,
    *,
    rng: Optional[random.Random] = None,
) -> tuple[Question, ...]:
    """Draw ``count`` distinct questions from ``bank`` in random order.

    A working list of bank indices is shuffled and the first ``count`` are
    taken, so every ordered ``count``-subset is equally likely. The bank is
    left untouched.
    """

    size = len(bank)
    if isinstance(count, bool) or not isinstance(count, int):
        raise QuizError(
            ErrorKind.INVALID_ARGUMENT,
            f"Question count must be an integer, got {count!r}.",
        )
    if not 1 <= count <= size:
        raise QuizError(
            ErrorKind.INVALID_ARGUMENT,
            f"Question count must be between 1 and {size}, got {count}.",
        )

    source = rng if rng is not None else make_rng()
    indices = list(range(size))
    source.shuffle(indices)
    return tuple(bank[index] for index in indices[:count])
