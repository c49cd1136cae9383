from __future__ import annotations

import logging
import operator
import random
from typing import Callable

from .models import Difficulty, Question

logger = logging.getLogger(__name__)


_OPS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}

_OPS_BY_DIFFICULTY = {
    Difficulty.EASY: ["+", "-"],
    Difficulty.MEDIUM: ["+", "-", "*"],
    Difficulty.HARD: ["+", "-", "*", "/"],
}

OPTION_COUNT = 4
NEARBY_ATTEMPTS = 50  # after this many tries, fall back to random distractors
NEARBY_OFFSETS = (-5, 4)
FALLBACK_RANGE = (1, 100)


class QuestionGenerator:
    """Generate adaptive multiple-choice arithmetic questions."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        # distractor proposals used by the most recent generate() call
        self.last_option_attempts = 0

    def _pick_operator(self, difficulty: Difficulty) -> str:
        return self._rng.choice(_OPS_BY_DIFFICULTY[difficulty])

    def _generate_division(self, difficulty: Difficulty) -> tuple[int, int, int]:
        """
        Generate a / b with an exact integer result.

        The quotient is chosen first and the dividend derived from it, so the
        dividend may exceed the operand bound of the other operators.
        """
        max_value = difficulty * 10
        divisor = self._rng.randint(2, max_value // 2 + 1)
        quotient = self._rng.randint(1, 10)
        return divisor * quotient, divisor, quotient

    def _generate_operands(self, op_symbol: str, difficulty: Difficulty) -> tuple[int, int, int]:
        if op_symbol == "/":
            return self._generate_division(difficulty)

        max_value = difficulty * 10
        a = self._rng.randint(1, max_value)
        b = self._rng.randint(1, max_value)
        # subtraction can go negative; that is accepted as-is
        return a, b, _OPS[op_symbol](a, b)

    def _build_options(self, answer: int) -> tuple[list[int], int]:
        """
        Return the answer plus three distinct positive distractors, and the
        number of proposals it took.

        Nearby values are tried first; once those have been tried
        NEARBY_ATTEMPTS times the proposals come from FALLBACK_RANGE instead,
        which keeps answers close to zero from stalling the loop.
        """
        options = [answer]
        attempts = 0
        while len(options) < OPTION_COUNT:
            attempts += 1
            if attempts > NEARBY_ATTEMPTS:
                wrong = self._rng.randint(*FALLBACK_RANGE)
            else:
                wrong = answer + self._rng.randint(*NEARBY_OFFSETS)

            if wrong > 0 and wrong not in options:
                options.append(wrong)

        if attempts > NEARBY_ATTEMPTS:
            logger.debug("distractors for %d needed %d attempts", answer, attempts)

        self._rng.shuffle(options)
        return options, attempts

    def generate(self, difficulty: int) -> Question:
        try:
            level = Difficulty(difficulty)
        except ValueError:
            raise ValueError(f"Unsupported difficulty: {difficulty}") from None

        op_symbol = self._pick_operator(level)
        a, b, result = self._generate_operands(op_symbol, level)
        options, self.last_option_attempts = self._build_options(result)

        question = Question(
            operand1=a,
            operator=op_symbol,
            operand2=b,
            correct_answer=result,
            options=tuple(options),
            difficulty=level,
        )
        logger.debug("generated %s (level %d)", question.prompt, level)
        return question
