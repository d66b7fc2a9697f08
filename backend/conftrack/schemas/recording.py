from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from conftrack.schemas.common import PartialUpdate


class RecordingCreate(BaseModel):
    """Body of POST /recordings."""
    title: str = Field(min_length=1)
    conference_id: int = Field(description="Owning conference (must exist)")
    tenant_id: int
    file_path: str = Field(description="Object storage path or URL of the media")


class RecordingUpdate(PartialUpdate):
    title: Optional[str] = Field(default=None, min_length=1)
    conference_id: Optional[int] = None
    tenant_id: Optional[int] = None
    file_path: Optional[str] = None


class RecordingResponse(BaseModel):
    id: int
    title: str
    conference_id: int
    tenant_id: int
    file_path: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
