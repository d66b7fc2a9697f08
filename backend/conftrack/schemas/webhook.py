"""
ConfTrack Backend: Webhook Payload Schemas
==========================================

What:  Wire contract for POST /recordings/webhook/recording-started.
How:   Identifier-like fields arrive as strings and stay strings here; the
       webhook service coerces them to integers so that a bad value becomes a
       webhook failure envelope rather than FastAPI's 422.

Example request body:
    {
        "event": "recording.started",
        "data": {
            "recording_id": "r1",
            "conference_id": "42",
            "tenant_id": "7",
            "session_id": "99",
            "recording_url": "https://store/rec1.mp4",
            "title": "Standup",
            "start_time": "2024-01-01T10:00:00Z",
            "host_user_id": "5",
            "host_user_name": "Alice"
        }
    }
"""

from typing import Optional

from pydantic import BaseModel, Field

RECORDING_STARTED_EVENT = "recording.started"


class RecordingStartedData(BaseModel):
    """
    Event body. recording_id, host_user_id, host_user_name and tenant_name
    are accepted but not persisted anywhere.
    """
    recording_id: str = Field(description="Provider-side recording identifier (unused)")
    conference_id: str = Field(description="Numeric conference id, as a string")
    tenant_id: str = Field(description="Numeric tenant id, as a string")
    session_id: str = Field(description="Numeric session id, as a string")
    recording_url: str = Field(description="Object storage URL of the recording")
    title: str
    start_time: str = Field(description="ISO 8601 start of the recording")
    host_user_id: str
    host_user_name: str
    tenant_name: Optional[str] = None


class RecordingStartedEvent(BaseModel):
    event: str = Field(description="Event discriminator, normally 'recording.started'")
    data: RecordingStartedData


class WebhookAck(BaseModel):
    """
    Envelope returned by the webhook, on success and on failure.

    error_code is only populated on failures when structured webhook errors
    are enabled in settings.
    """
    status: str = Field(description="'success' or 'failure'")
    message: str
    error_code: Optional[str] = None
