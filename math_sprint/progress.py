from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List

from .models import OPERATORS, SessionResult, rounded_percent

HISTORY_LIMIT = 20


@dataclass(frozen=True)
class OperatorMastery:
    attempts: int
    correct: int

    @property
    def percent(self) -> int:
        return rounded_percent(self.correct, self.attempts)


class ProgressHistory:
    """
    Most recent session results, newest first.

    Only the last `limit` games are retained; totals and mastery are computed
    over what is retained.
    """

    def __init__(self, limit: int = HISTORY_LIMIT, results: Iterable[SessionResult] = ()) -> None:
        self._results: deque[SessionResult] = deque(list(results)[:limit], maxlen=limit)

    def __len__(self) -> int:
        return len(self._results)

    @property
    def results(self) -> List[SessionResult]:
        return list(self._results)

    def record(self, result: SessionResult) -> None:
        # appendleft on a bounded deque drops the oldest entry from the right
        self._results.appendleft(result)

    def total_xp(self) -> int:
        return sum(r.score for r in self._results)

    def operator_mastery(self) -> dict[str, OperatorMastery]:
        """Per-operator accuracy across retained games, skipping unplayed operators."""
        totals = {op: [0, 0] for op in OPERATORS}
        for result in self._results:
            for op, stats in result.operator_stats.items():
                if op in totals:
                    totals[op][0] += stats.attempts
                    totals[op][1] += stats.correct
        return {
            op: OperatorMastery(attempts=attempts, correct=correct)
            for op, (attempts, correct) in totals.items()
            if attempts > 0
        }

    def recent_scores(self, n: int = 10) -> List[int]:
        """Scores of the last `n` games, oldest first."""
        recent = list(self._results)[:n]
        return [r.score for r in reversed(recent)]
