"""Competition and score schemas: question validation, submissions, score bounds."""

import pytest
from pydantic import ValidationError

from ecoaware.schemas.competition import (
    CompetitionCreate, QuestionCreate, SubmissionCreate,
)
from ecoaware.schemas.score import UserScoreCreate
from ecoaware.schemas.event import RegistrationCreate


def test_question_points_default_to_ten():
    q = QuestionCreate(question="?", options=["a", "b"], correct_answer=1)
    assert q.points == 10


def test_question_correct_answer_out_of_range():
    with pytest.raises(ValidationError):
        QuestionCreate(question="?", options=["a", "b"], correct_answer=2)


def test_question_needs_two_options():
    with pytest.raises(ValidationError):
        QuestionCreate(question="?", options=["only"], correct_answer=0)


def test_competition_difficulty_enum():
    data = {
        "title": "t", "description": "d", "questionCount": 5,
        "estimatedMinutes": 5,
    }
    assert CompetitionCreate.model_validate({**data, "difficulty": "Hard"}).difficulty.value == "Hard"
    with pytest.raises(ValidationError):
        CompetitionCreate.model_validate({**data, "difficulty": "hard"})


def test_submission_allows_skipped_answers():
    body = SubmissionCreate.model_validate({"answers": [0, None, 2]})
    assert body.answers == [0, None, 2]


def test_user_score_rejects_negative_values():
    with pytest.raises(ValidationError):
        UserScoreCreate(competition_id=1, score=-1, total_questions=1)
    with pytest.raises(ValidationError):
        UserScoreCreate(competition_id=1, score=1, total_questions=-1)


def test_user_score_ignores_user_id():
    body = UserScoreCreate.model_validate(
        {"competitionId": 1, "score": 5, "totalQuestions": 1, "userId": "x"},
    )
    assert not hasattr(body, "user_id")


def test_registration_event_id_must_be_positive():
    with pytest.raises(ValidationError):
        RegistrationCreate(event_id=0)
