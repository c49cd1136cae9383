from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3


class SessionState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    ENDED = "ended"


OPERATORS = ("+", "-", "*", "/")

DISPLAY_SYMBOLS = {"+": "+", "-": "-", "*": "×", "/": "÷"}


@dataclass(frozen=True)
class Question:
    """
    A single generated arithmetic problem.

    - `operand1`, `operand2`: the two numbers shown to the player
    - `operator`: one of "+", "-", "*", "/"
    - `correct_answer`: exact integer result
    - `options`: four distinct choices in presentation order
    - `difficulty`: level the question was generated for
    """

    operand1: int
    operator: str
    operand2: int
    correct_answer: int
    options: tuple[int, ...]
    difficulty: Difficulty = Difficulty.EASY

    @property
    def question_text(self) -> str:
        symbol = DISPLAY_SYMBOLS[self.operator]
        return f"{self.operand1} {symbol} {self.operand2}"

    @property
    def prompt(self) -> str:
        return f"{self.question_text} = ?"


@dataclass
class OperatorStats:
    attempts: int = 0
    correct: int = 0


@dataclass(frozen=True)
class MistakeRecord:
    question_text: str
    submitted_answer: int
    correct_answer: int


@dataclass(frozen=True)
class SessionResult:
    """Final snapshot of a session, read by history and achievement consumers."""

    score: int
    accuracy: int
    max_streak: int
    total_attempts: int
    operator_stats: dict[str, OperatorStats] = field(default_factory=dict)
    played_on: date = field(default_factory=date.today)


def fresh_operator_stats() -> dict[str, OperatorStats]:
    return {op: OperatorStats() for op in OPERATORS}


def rounded_percent(part: int, whole: int) -> int:
    """Percentage rounded half-up, 0 when `whole` is 0."""
    if whole == 0:
        return 0
    return (200 * part + whole) // (2 * whole)
