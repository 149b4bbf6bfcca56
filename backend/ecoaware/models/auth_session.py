"""AuthSession ORM: server-side cookie session store.

Invariants:
    - sid is the opaque cookie value
    - sess holds {"user_id": ..., "claims": {...}} from the identity provider
    - Rows past `expire` are treated as absent and deleted on access
"""

from datetime import datetime

from sqlalchemy import String, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column

from ecoaware.db.base import Base


class AuthSession(Base):
    """Login session, one row per browser cookie."""
    __tablename__ = "sessions"
    __table_args__ = (Index("IDX_session_expire", "expire"),)

    sid: Mapped[str] = mapped_column(String(255), primary_key=True)
    sess: Mapped[dict] = mapped_column(JSON, nullable=False)
    expire: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
