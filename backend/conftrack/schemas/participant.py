from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from conftrack.schemas.common import PartialUpdate


class ParticipantCreate(BaseModel):
    """Body of POST /participants."""
    session_id: int = Field(description="Session attended (must exist)")
    user_id: int
    join_time: datetime
    leave_time: datetime
    duration_seconds: int = Field(ge=0)


class ParticipantUpdate(PartialUpdate):
    session_id: Optional[int] = None
    user_id: Optional[int] = None
    join_time: Optional[datetime] = None
    leave_time: Optional[datetime] = None
    duration_seconds: Optional[int] = Field(default=None, ge=0)


class ParticipantResponse(BaseModel):
    id: int
    session_id: int
    user_id: int
    join_time: datetime
    leave_time: datetime
    duration_seconds: int

    model_config = {"from_attributes": True}
