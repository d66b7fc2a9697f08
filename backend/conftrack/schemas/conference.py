from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from conftrack.schemas.common import PartialUpdate


class ConferenceCreate(BaseModel):
    """Body of POST /conferences."""
    name: str = Field(min_length=1, description="Display name")
    host_user_id: int = Field(description="Hosting user reference")
    tenant_id: int = Field(description="Owning tenant")
    start_time: datetime = Field(description="Scheduled or actual start (ISO 8601)")
    end_time: Optional[datetime] = Field(default=None, description="End time, if known")


class ConferenceUpdate(PartialUpdate):
    """Body of PATCH /conferences/{id}; only supplied fields are merged."""
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"end_time"})

    name: Optional[str] = Field(default=None, min_length=1)
    host_user_id: Optional[int] = None
    tenant_id: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class ConferenceResponse(BaseModel):
    id: int
    name: str
    host_user_id: int
    tenant_id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
