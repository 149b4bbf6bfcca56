"""Quiz Scoring: pure scoring of submitted answers against competition questions.

Invariants:
    - answers[i] is compared with questions[i] (positional, no question ids)
    - A matching answer adds the question's points; NULL points count as default_points
    - Answers beyond the question list are ignored; missing answers score 0
    - No IO, no DB: questions arrive as any object exposing correct_answer/points
    - Percentages round half up (12.5 -> 13), never to even

Design Decisions:
    - QuestionLike Protocol over the ORM model: scoring is testable with plain objects
"""

import math
from typing import Protocol, Sequence

DEFAULT_POINTS = 10


class QuestionLike(Protocol):
    """Structural contract for a scorable question."""
    correct_answer: int
    points: int | None


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (12.5 -> 13)."""
    return math.floor(value + 0.5)


def _points(question: QuestionLike, default_points: int) -> int:
    return question.points if question.points is not None else default_points


def _matches(questions: Sequence[QuestionLike], answers: Sequence[int | None]):
    for question, answer in zip(questions, answers):
        if answer is not None and answer == question.correct_answer:
            yield question


def score_answers(
    questions: Sequence[QuestionLike],
    answers: Sequence[int | None],
    default_points: int = DEFAULT_POINTS,
) -> int:
    """Sum of points for answers that match the correct option."""
    return sum(_points(q, default_points) for q in _matches(questions, answers))


def count_correct(
    questions: Sequence[QuestionLike], answers: Sequence[int | None],
) -> int:
    return sum(1 for _ in _matches(questions, answers))


def max_score(
    questions: Sequence[QuestionLike], default_points: int = DEFAULT_POINTS,
) -> int:
    """Score obtained when every question is answered correctly."""
    return sum(_points(q, default_points) for q in questions)


def score_percentage(
    score: int, total_questions: int, points_per_question: int = DEFAULT_POINTS,
) -> int:
    """Rounded percentage of the nominal maximum (total_questions * points).

    The nominal maximum assumes every question is worth points_per_question,
    which is how results are displayed on the dashboard.
    """
    if total_questions <= 0 or points_per_question <= 0:
        return 0
    return round_half_up(score / (total_questions * points_per_question) * 100)
