"""
Audit the rule-based question generator.

This script:
- samples questions at each difficulty level
- counts how often each operator is picked
- checks option sets and division results for malformed questions
- reports the worst-case number of distractor proposals.

Usage:
    python evaluate_generator.py
"""

from __future__ import annotations

import torch

from math_sprint.models import OPERATORS, Difficulty
from math_sprint.question_generator import OPTION_COUNT, QuestionGenerator

OP_TO_IDX = {op: i for i, op in enumerate(OPERATORS)}


def audit_generator(
    difficulty: Difficulty,
    n_samples: int = 2000,
    seed: int = 999,
) -> dict:
    generator = QuestionGenerator(seed=seed)
    op_indices = []
    malformed = 0
    inexact_divisions = 0
    max_attempts = 0

    for _ in range(n_samples):
        q = generator.generate(difficulty)
        op_indices.append(OP_TO_IDX[q.operator])

        distractors = [o for o in q.options if o != q.correct_answer]
        if (
            len(set(q.options)) != OPTION_COUNT
            or q.correct_answer not in q.options
            or any(o <= 0 for o in distractors)
        ):
            malformed += 1

        if q.operator == "/" and (
            q.operand1 % q.operand2 != 0 or q.operand1 // q.operand2 != q.correct_answer
        ):
            inexact_divisions += 1

        max_attempts = max(max_attempts, generator.last_option_attempts)

    counts = torch.bincount(torch.tensor(op_indices, dtype=torch.long), minlength=len(OPERATORS))
    return {
        "operator_counts": {op: int(counts[i]) for op, i in OP_TO_IDX.items()},
        "malformed": malformed,
        "inexact_divisions": inexact_divisions,
        "max_attempts": max_attempts,
    }


def report(n_samples: int = 2000) -> None:
    for difficulty in Difficulty:
        print(f"[audit] level {int(difficulty)}: sampling {n_samples} questions...")
        stats = audit_generator(difficulty, n_samples=n_samples)
        counts = torch.tensor(list(stats["operator_counts"].values()), dtype=torch.float)
        shares = counts / counts.sum()
        for op, share in zip(OPERATORS, shares.tolist()):
            print(f"[audit]   {op}: {share:.3f}")
        print(f"[audit]   malformed option sets: {stats['malformed']}")
        print(f"[audit]   inexact divisions:     {stats['inexact_divisions']}")
        print(f"[audit]   max distractor tries:  {stats['max_attempts']}")


if __name__ == "__main__":
    report()
