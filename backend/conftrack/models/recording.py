"""
ConfTrack Backend: Recording SQLAlchemy Model
=============================================

What:  ORM model for the `recordings` table.
How:   Created by CRUD calls or by the recording.started webhook. The media
       itself lives in external object storage; `file_path` holds its URL.

Webhook rows:
    created_at is the event's start_time (historical backfill), updated_at is
    the wall-clock time the event was processed. Replayed events produce one
    row per delivery; there is no deduplication key.
"""

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from conftrack.database import Base
from conftrack.models.mixins import AuditTimestampsMixin
from conftrack.models.types import BigIntPK


class Recording(AuditTimestampsMixin, Base):
    """A recording of one conference, stored by URL."""

    __tablename__ = "recordings"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)

    conference_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("conferences.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
    )

    tenant_id: Mapped[int] = mapped_column("tenantId", Integer, nullable=False)

    file_path: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Storage path or URL of the recording in object storage",
    )

    __table_args__ = (
        Index("idx_recordings_conference_id", conference_id),
    )

    def __repr__(self) -> str:
        return (
            f"<Recording(id={self.id}, conference_id={self.conference_id}, "
            f"tenant_id={self.tenant_id})>"
        )
