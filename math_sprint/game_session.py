"""Timed quiz session: scoring, streaks, adaptive difficulty and the clock."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from .models import (
    Difficulty,
    MistakeRecord,
    OperatorStats,
    Question,
    SessionResult,
    SessionState,
    fresh_operator_stats,
    rounded_percent,
)
from .question_generator import QuestionGenerator

logger = logging.getLogger(__name__)

EndListener = Callable[[SessionResult], None]


@dataclass(frozen=True)
class GameRules:
    """Tuning knobs for a session."""

    start_seconds: int = 60
    correct_bonus_seconds: int = 2
    wrong_penalty_seconds: int = 5
    base_points: int = 10
    streak_multiplier: int = 2
    medium_above: int = 50
    hard_above: int = 100

    def difficulty_for(self, score: int) -> Difficulty:
        if score > self.hard_above:
            return Difficulty.HARD
        if score > self.medium_above:
            return Difficulty.MEDIUM
        return Difficulty.EASY


class GameSession:
    """
    One player's timed run, reset and reused across games.

    The session never schedules anything itself: a driver calls `tick()` once
    per second while `active` is true, and is expected to let at most one
    `submit_answer()` through per displayed question.

    Usage:

    ```python
    session = GameSession(generator=QuestionGenerator(seed=7))
    session.start()
    session.submit_answer(session.current_question.options[0])
    session.advance_question()
    ```
    """

    def __init__(
        self,
        generator: QuestionGenerator | None = None,
        rules: GameRules | None = None,
        seed: int | None = None,
    ) -> None:
        self._generator = generator if generator is not None else QuestionGenerator(seed=seed)
        self.rules = rules or GameRules()
        self._end_listeners: list[EndListener] = []
        self.state = SessionState.IDLE
        self._reset()

    def _reset(self) -> None:
        self.score = 0
        self.time_remaining = self.rules.start_seconds
        self.difficulty = Difficulty.EASY
        self.current_question: Question | None = None
        self.total_attempts = 0
        self.correct_attempts = 0
        self.streak = 0
        self.max_streak = 0
        self.mistakes: list[MistakeRecord] = []
        self.operator_stats: dict[str, OperatorStats] = fresh_operator_stats()

    @property
    def active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def add_end_listener(self, listener: EndListener) -> None:
        """
        Register a callback that receives the final snapshot when a game ends.

        Every listener is called even if an earlier one raises; the first
        error is re-raised once all of them have run.
        """
        self._end_listeners.append(listener)

    def start(self) -> None:
        self._reset()
        self.state = SessionState.ACTIVE
        self.current_question = self._generator.generate(self.difficulty)
        logger.info("session started with %ds on the clock", self.time_remaining)

    def tick(self) -> None:
        if not self.active:
            return
        self.time_remaining -= 1
        self._end_if_out_of_time()

    def submit_answer(self, candidate: int) -> bool:
        if not self.active or self.current_question is None:
            return False

        question = self.current_question
        stats = self.operator_stats[question.operator]
        self.total_attempts += 1
        stats.attempts += 1

        is_correct = candidate == question.correct_answer
        if is_correct:
            stats.correct += 1
            self.correct_attempts += 1
            self.streak += 1
            self.max_streak = max(self.max_streak, self.streak)
            self.score += self.rules.base_points + self.streak * self.rules.streak_multiplier
            self.time_remaining += self.rules.correct_bonus_seconds
        else:
            self.mistakes.append(
                MistakeRecord(
                    question_text=question.question_text,
                    submitted_answer=candidate,
                    correct_answer=question.correct_answer,
                )
            )
            self.streak = 0
            self.time_remaining -= self.rules.wrong_penalty_seconds
            self._end_if_out_of_time()

        return is_correct

    def advance_question(self) -> None:
        if not self.active:
            return
        self.difficulty = self.rules.difficulty_for(self.score)
        self.current_question = self._generator.generate(self.difficulty)

    def end(self) -> None:
        if not self.active:
            return
        self.state = SessionState.ENDED
        logger.info(
            "session ended: score=%d accuracy=%d%% max_streak=%d",
            self.score,
            self.accuracy(),
            self.max_streak,
        )
        result = self.snapshot()
        first_error: Exception | None = None
        for listener in self._end_listeners:
            try:
                listener(result)
            except Exception as exc:
                logger.exception("end listener %r failed", listener)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def accuracy(self) -> int:
        return rounded_percent(self.correct_attempts, self.total_attempts)

    def snapshot(self) -> SessionResult:
        return SessionResult(
            score=self.score,
            accuracy=self.accuracy(),
            max_streak=self.max_streak,
            total_attempts=self.total_attempts,
            operator_stats={op: replace(s) for op, s in self.operator_stats.items()},
        )

    def _end_if_out_of_time(self) -> None:
        if self.time_remaining <= 0:
            self.time_remaining = 0
            self.end()
