"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is referenced by every user-owned row (user_id FK)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all / alembic autogenerate runs
"""

from ecoaware.models.user import User  # noqa: F401
from ecoaware.models.auth_session import AuthSession  # noqa: F401
from ecoaware.models.event import Event  # noqa: F401
from ecoaware.models.event_registration import EventRegistration  # noqa: F401
from ecoaware.models.competition import Competition  # noqa: F401
from ecoaware.models.competition_question import CompetitionQuestion  # noqa: F401
from ecoaware.models.user_score import UserScore  # noqa: F401
from ecoaware.models.problem import Problem  # noqa: F401
from ecoaware.models.community_post import CommunityPost  # noqa: F401
from ecoaware.models.post_like import PostLike  # noqa: F401
from ecoaware.models.post_comment import PostComment  # noqa: F401
