from .achievements import BADGES, Badge, evaluate_achievements
from .game_session import GameRules, GameSession
from .models import Difficulty, MistakeRecord, OperatorStats, Question, SessionResult, SessionState
from .progress import OperatorMastery, ProgressHistory
from .question_generator import QuestionGenerator

__all__ = [
    "BADGES",
    "Badge",
    "Difficulty",
    "GameRules",
    "GameSession",
    "MistakeRecord",
    "OperatorMastery",
    "OperatorStats",
    "ProgressHistory",
    "Question",
    "QuestionGenerator",
    "SessionResult",
    "SessionState",
    "evaluate_achievements",
]
