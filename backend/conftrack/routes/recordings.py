"""
ConfTrack Backend: Recording Routes
===================================

What:  Standard CRUD for /recordings plus the inbound recording.started
       webhook at POST /recordings/webhook/recording-started.
How:   CRUD comes from build_crud_router(); the webhook delegates to
       RecordingWebhookService. Webhook failures are rendered by the
       WebhookProcessingError handler in main.py as a 404 failure envelope.
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from conftrack.database import get_db_session
from conftrack.middleware.logging import tag_webhook_request
from conftrack.routes.crud import build_crud_router
from conftrack.schemas.recording import (
    RecordingCreate,
    RecordingResponse,
    RecordingUpdate,
)
from conftrack.schemas.webhook import RecordingStartedEvent, WebhookAck
from conftrack.services.resource_service import recording_service
from conftrack.services.webhook_service import recording_webhook_service

logger = logging.getLogger(__name__)

router = build_crud_router(
    prefix="/recordings",
    tag="Recordings",
    service=recording_service,
    create_schema=RecordingCreate,
    update_schema=RecordingUpdate,
    response_schema=RecordingResponse,
)


@router.post(
    "/webhook/recording-started",
    status_code=200,
    response_model=WebhookAck,
    response_model_exclude_none=True,
    responses={
        200: {"description": "Event reconciled", "model": WebhookAck},
        404: {"description": "Event could not be processed", "model": WebhookAck},
    },
    summary="Receive a recording.started event",
    description=(
        "Creates a Recording row for the event and patches the referenced "
        "Session's recording_url. Any failure returns the same failure envelope."
    ),
)
async def recording_started(
    request: Request,
    payload: RecordingStartedEvent,
    db: AsyncSession = Depends(get_db_session),
) -> WebhookAck:
    logger.info(
        "Received %s for session=%s conference=%s",
        payload.event, payload.data.session_id, payload.data.conference_id,
    )
    tag_webhook_request(request, payload.event, payload.data.session_id)
    return await recording_webhook_service.handle_recording_started(db, payload)
