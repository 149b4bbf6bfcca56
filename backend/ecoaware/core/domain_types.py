"""Domain Types: enums and identity types shared across the codebase.

Invariants:
    - All closed value sets (post types, problem statuses) encoded as Enums
    - COMMUNITY_POST_TYPES and BLOG_POST_TYPES partition PostType

Design Decisions:
    - str Enums: serialize to JSON and compare against DB strings without converters
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
CompetitionId = NewType("CompetitionId", int)
PostId = NewType("PostId", int)


# ─── Enums ───────────────────────────────────────────────────────

class PostType(str, Enum):
    """Kind of community content. Maps to community_posts.post_type."""
    GENERAL = "general"
    REVIEW = "review"
    WISH = "wish"
    FEEDBACK = "feedback"
    IDEA = "idea"


COMMUNITY_POST_TYPES = frozenset({PostType.GENERAL, PostType.REVIEW, PostType.WISH})
BLOG_POST_TYPES = frozenset({PostType.FEEDBACK, PostType.IDEA})


class ProblemStatus(str, Enum):
    """Lifecycle of a problem report. Maps to problems.status."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class Difficulty(str, Enum):
    """Quiz difficulty labels shown in the catalogue."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
