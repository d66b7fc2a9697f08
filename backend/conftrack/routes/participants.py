from conftrack.routes.crud import build_crud_router
from conftrack.schemas.participant import (
    ParticipantCreate,
    ParticipantResponse,
    ParticipantUpdate,
)
from conftrack.services.resource_service import participant_service

router = build_crud_router(
    prefix="/participants",
    tag="Participants",
    service=participant_service,
    create_schema=ParticipantCreate,
    update_schema=ParticipantUpdate,
    response_schema=ParticipantResponse,
)
