"""Score Service: quiz results, leaderboard and dashboard aggregation.

Invariants:
    - User scores listed newest first
    - Leaderboard groups by user, orders by summed score desc then user id,
      and is limited to `limit` rows
    - Dashboard stats computed in core/score_stats.py from loaded rows
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.core.errors import ResourceNotFoundError
from ecoaware.core.quiz_scoring import DEFAULT_POINTS
from ecoaware.core.score_stats import compute_dashboard_stats, rank_leaderboard
from ecoaware.models.community_post import CommunityPost
from ecoaware.models.competition import Competition
from ecoaware.models.event_registration import EventRegistration
from ecoaware.models.problem import Problem
from ecoaware.models.user import User
from ecoaware.models.user_score import UserScore
from ecoaware.schemas.score import UserScoreCreate

logger = logging.getLogger(__name__)


class ScoreService:
    """Scores and rankings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_user_scores(self, user_id: str) -> list[UserScore]:
        result = await self.db.execute(
            select(UserScore)
            .where(UserScore.user_id == user_id)
            .order_by(UserScore.completed_at.desc(), UserScore.id.desc()),
        )
        return list(result.scalars().all())

    async def create_user_score(
        self, user_id: str, data: UserScoreCreate,
    ) -> UserScore:
        exists = await self.db.execute(
            select(Competition.id).where(Competition.id == data.competition_id),
        )
        if exists.scalar_one_or_none() is None:
            raise ResourceNotFoundError("Competition", data.competition_id)

        user_score = UserScore(user_id=user_id, **data.model_dump())
        self.db.add(user_score)
        await self.db.commit()
        await self.db.refresh(user_score)
        return user_score

    async def leaderboard(self, limit: int = 10) -> list[dict]:
        total = func.sum(UserScore.score).label("total_score")
        quiz_count = func.count(UserScore.id).label("quiz_count")
        result = await self.db.execute(
            select(
                UserScore.user_id, total, quiz_count,
                User.first_name, User.last_name, User.profile_image_url,
            )
            .outerjoin(User, User.id == UserScore.user_id)
            .group_by(
                UserScore.user_id,
                User.first_name, User.last_name, User.profile_image_url,
            )
            .order_by(total.desc(), UserScore.user_id)
            .limit(limit),
        )
        rows = [
            {
                "user_id": row.user_id,
                "total_score": int(row.total_score or 0),
                "quiz_count": int(row.quiz_count),
                "first_name": row.first_name,
                "last_name": row.last_name,
                "profile_image_url": row.profile_image_url,
            }
            for row in result.all()
        ]
        return rank_leaderboard(rows)

    async def _count(self, model, user_id: str) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(model).where(model.user_id == user_id),
        )
        return int(result.scalar_one())

    async def dashboard_stats(
        self, user_id: str, points_per_question: int = DEFAULT_POINTS,
    ) -> dict:
        scores = await self.list_user_scores(user_id)
        return compute_dashboard_stats(
            scores,
            events_registered=await self._count(EventRegistration, user_id),
            problems_reported=await self._count(Problem, user_id),
            posts_created=await self._count(CommunityPost, user_id),
            points_per_question=points_per_question,
        )
