from conftrack.routes.crud import build_crud_router
from conftrack.schemas.conference import (
    ConferenceCreate,
    ConferenceResponse,
    ConferenceUpdate,
)
from conftrack.services.resource_service import conference_service

router = build_crud_router(
    prefix="/conferences",
    tag="Conferences",
    service=conference_service,
    create_schema=ConferenceCreate,
    update_schema=ConferenceUpdate,
    response_schema=ConferenceResponse,
)
