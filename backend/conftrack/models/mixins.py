from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from conftrack.models.types import UTCDateTime, next_update_timestamp, utcnow


class AuditTimestampsMixin:
    """created_at / updated_at pair for Conference, Recording and Session."""

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
        comment="Row creation time (UTC); the webhook backfills the recording start",
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
        comment="Last mutation time (UTC); strictly increasing per row",
    )

    def touch(self) -> None:
        """Advance updated_at; call on every mutation."""
        self.updated_at = next_update_timestamp(self.updated_at)
