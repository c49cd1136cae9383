from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List

from .models import SessionResult
from .progress import ProgressHistory


@dataclass(frozen=True)
class Badge:
    id: str
    icon: str
    title: str
    description: str
    earned: Callable[[SessionResult, ProgressHistory], bool]


BADGES = (
    Badge("first_win", "🌱", "Beginner", "Complete 1 Game", lambda r, h: len(h) >= 1),
    Badge("score_200", "🔥", "On Fire", "Score 200+ pts", lambda r, h: r.score >= 200),
    Badge("streak_10", "⚡", "Unstoppable", "10 Streak", lambda r, h: r.max_streak >= 10),
    Badge(
        "perfect",
        "💎",
        "Perfectionist",
        "100% Accuracy",
        lambda r, h: r.accuracy == 100 and r.total_attempts >= 5,
    ),
    Badge("veteran", "👑", "Math King", "Total 1000 XP", lambda r, h: h.total_xp() >= 1000),
)


def evaluate_achievements(
    result: SessionResult,
    history: ProgressHistory,
    unlocked: Iterable[str] = (),
) -> List[str]:
    """
    Return badge ids unlocked after `result`.

    `history` is expected to already contain `result`. Previously unlocked ids
    are kept in their original order; new ones follow in catalogue order.
    """
    badges = list(unlocked)
    for badge in BADGES:
        if badge.id not in badges and badge.earned(result, history):
            badges.append(badge.id)
    return badges
