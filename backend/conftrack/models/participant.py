from datetime import datetime

from sqlalchemy import BigInteger, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from conftrack.database import Base
from conftrack.models.types import BigIntPK, UTCDateTime


class Participant(Base):
    """
    A user's attendance in one session.

    No tenant column and no audit timestamps: tenancy follows
    Participant → Session → Conference.
    """

    __tablename__ = "participants"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    session_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("sessions.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
    )

    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)

    join_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    leave_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    duration_seconds: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index("idx_participants_session_id", session_id),
    )

    def __repr__(self) -> str:
        return f"<Participant(id={self.id}, session_id={self.session_id}, user_id={self.user_id})>"
