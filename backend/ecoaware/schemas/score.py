"""Score Schemas: quiz results, leaderboard and dashboard stats."""

from datetime import datetime

from pydantic import Field

from ecoaware.schemas.base import ApiModel


class UserScoreCreate(ApiModel):
    """Client-computed result. user_id always comes from the session."""
    competition_id: int = Field(ge=1)
    score: int = Field(ge=0)
    total_questions: int = Field(ge=0)


class UserScoreResponse(ApiModel):
    id: int
    user_id: str
    competition_id: int
    score: int
    total_questions: int
    completed_at: datetime | None = None


class SubmissionResult(ApiModel):
    """Server-scored attempt."""
    score: int
    correct_answers: int
    total_questions: int
    max_score: int
    percentage: int
    user_score: UserScoreResponse


class LeaderboardEntry(ApiModel):
    rank: int
    user_id: str
    total_score: int
    quiz_count: int
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class DashboardStats(ApiModel):
    total_score: int
    completed_quizzes: int
    average_percentage: int
    best_percentage: int
    events_registered: int
    problems_reported: int
    posts_created: int
