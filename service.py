from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from math_sprint import QuestionGenerator

logger = logging.getLogger("math-sprint")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Math Sprint Question Service")
generator = QuestionGenerator()


class GenerateRequest(BaseModel):
    difficulty: int = Field(ge=1, le=3)
    n: int = Field(default=10, ge=1, le=100)
    seed: Optional[int] = None


class QuestionResponse(BaseModel):
    prompt: str
    questionText: str
    operand1: int
    operand2: int
    operator: str
    options: List[int]
    answer: int
    difficulty: int


@app.post("/generate", response_model=List[QuestionResponse])
def generate_questions(body: GenerateRequest) -> List[QuestionResponse]:
    gen = generator if body.seed is None else QuestionGenerator(seed=body.seed)
    questions = [gen.generate(body.difficulty) for _ in range(body.n)]
    logger.info("generated %d level-%d questions", len(questions), body.difficulty)
    return [
        QuestionResponse(
            prompt=q.prompt,
            questionText=q.question_text,
            operand1=q.operand1,
            operand2=q.operand2,
            operator=q.operator,
            options=list(q.options),
            answer=q.correct_answer,
            difficulty=int(q.difficulty),
        )
        for q in questions
    ]


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
