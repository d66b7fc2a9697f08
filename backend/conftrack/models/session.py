"""
ConfTrack Backend: Session SQLAlchemy Model
===========================================

What:  ORM model for the `sessions` table (a sitting within a conference).
How:   `recording_url` is patched after the fact by the recording.started
       webhook; everything else comes from CRUD calls.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from conftrack.database import Base
from conftrack.models.mixins import AuditTimestampsMixin
from conftrack.models.types import BigIntPK, UTCDateTime


class ConferenceSession(AuditTimestampsMixin, Base):
    """One session of a conference; participants hang off it."""

    __tablename__ = "sessions"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    conference_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("conferences.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
    )

    session_name: Mapped[str] = mapped_column(Text, nullable=False)

    start_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_time: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    # Empty until a recording.started event arrives for this session
    recording_url: Mapped[str] = mapped_column(Text, nullable=False, default="")

    duration_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    file_size_mb: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0.00"),
    )

    __table_args__ = (
        Index("idx_sessions_conference_id", conference_id),
    )

    def __repr__(self) -> str:
        return (
            f"<ConferenceSession(id={self.id}, conference_id={self.conference_id}, "
            f"session_name='{self.session_name}')>"
        )
