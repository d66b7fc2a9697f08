from datetime import datetime
from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from conftrack.schemas.common import PartialUpdate


class SessionCreate(BaseModel):
    """
    Body of POST /sessions.

    recording_url, duration_seconds and file_size_mb default to empty values
    so a session can be registered before its recording exists.
    """
    conference_id: int = Field(description="Owning conference (must exist)")
    session_name: str = Field(min_length=1)
    start_time: datetime
    end_time: Optional[datetime] = None
    recording_url: str = Field(default="", description="Set later by recording.started")
    duration_seconds: int = Field(default=0, ge=0)
    file_size_mb: Decimal = Field(
        default=Decimal("0.00"), ge=0, max_digits=10, decimal_places=2,
    )


class SessionUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"end_time"})

    conference_id: Optional[int] = None
    session_name: Optional[str] = Field(default=None, min_length=1)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    recording_url: Optional[str] = None
    duration_seconds: Optional[int] = Field(default=None, ge=0)
    file_size_mb: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=10, decimal_places=2,
    )


class SessionResponse(BaseModel):
    id: int
    conference_id: int
    session_name: str
    start_time: datetime
    end_time: Optional[datetime] = None
    recording_url: str
    duration_seconds: int
    file_size_mb: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
