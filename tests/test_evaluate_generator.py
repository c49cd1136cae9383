from evaluate_generator import audit_generator
from math_sprint import Difficulty


def test_audit_hard_level():
    stats = audit_generator(Difficulty.HARD, n_samples=400, seed=1)
    assert sum(stats["operator_counts"].values()) == 400
    assert all(count > 0 for count in stats["operator_counts"].values())
    assert stats["malformed"] == 0
    assert stats["inexact_divisions"] == 0
    assert stats["max_attempts"] <= 200


def test_audit_easy_level_uses_two_operators():
    stats = audit_generator(Difficulty.EASY, n_samples=200, seed=2)
    assert stats["operator_counts"]["*"] == 0
    assert stats["operator_counts"]["/"] == 0


def test_audit_reports_attempts_of_generated_questions():
    stats = audit_generator(Difficulty.MEDIUM, n_samples=100, seed=3)
    assert 3 <= stats["max_attempts"] <= 200
