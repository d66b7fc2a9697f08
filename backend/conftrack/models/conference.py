"""
ConfTrack Backend: Conference SQLAlchemy Model
==============================================

What:  ORM model for the `conferences` table.
How:   Parent row for recordings and sessions. Deletion is restricted while
       either kind of dependent exists (foreign keys use ON DELETE RESTRICT).

Tenancy:
    `tenantId` partitions conferences between organizations. Nothing in the
    API enforces tenant boundaries yet; callers can read any tenant's rows.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from conftrack.database import Base
from conftrack.models.mixins import AuditTimestampsMixin
from conftrack.models.types import BigIntPK, UTCDateTime


class Conference(AuditTimestampsMixin, Base):
    """A hosted conference owned by one tenant."""

    __tablename__ = "conferences"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    host_user_id: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="User hosting the conference (external user directory)",
    )

    tenant_id: Mapped[int] = mapped_column("tenantId", Integer, nullable=False)

    start_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_time: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (
        Index("idx_conferences_tenant_id", tenant_id),
    )

    def __repr__(self) -> str:
        return f"<Conference(id={self.id}, name='{self.name}', tenant_id={self.tenant_id})>"
