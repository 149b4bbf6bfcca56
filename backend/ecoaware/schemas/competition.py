"""Competition Schemas: quiz catalogue, questions and submissions.

Invariants:
    - QuestionCreate.correct_answer indexes into options (checked by model_validator)
    - SubmissionCreate.answers: one entry per question, None for skipped
"""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from ecoaware.core.domain_types import Difficulty
from ecoaware.schemas.base import ApiModel, strip_required


class CompetitionCreate(ApiModel):
    """Admin competition creation."""
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    difficulty: Difficulty
    question_count: int = Field(ge=1, le=500)
    estimated_minutes: int = Field(ge=1, le=600)
    prize_description: str | None = Field(None, max_length=255)
    image_url: str | None = Field(None, max_length=1024)
    is_active: bool = True

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_required(v)


class CompetitionResponse(ApiModel):
    id: int
    title: str
    description: str
    difficulty: str
    question_count: int
    estimated_minutes: int
    prize_description: str | None = None
    image_url: str | None = None
    is_active: bool
    created_at: datetime | None = None


class QuestionCreate(ApiModel):
    """Admin question creation. competition_id comes from the path."""
    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=2, max_length=10)
    correct_answer: int = Field(ge=0)
    points: int = Field(10, ge=0, le=1000)

    @field_validator("question")
    @classmethod
    def strip_question(cls, v: str) -> str:
        return strip_required(v)

    @model_validator(mode="after")
    def validate_correct_answer(self):
        if self.correct_answer >= len(self.options):
            raise ValueError("correct_answer must index into options")
        return self


class QuestionResponse(ApiModel):
    id: int
    competition_id: int
    question: str
    options: list[str]
    correct_answer: int
    points: int | None = None


class SubmissionCreate(ApiModel):
    """Answers chosen by the player, in question order."""
    answers: list[int | None] = Field(max_length=500)
