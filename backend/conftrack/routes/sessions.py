from conftrack.routes.crud import build_crud_router
from conftrack.schemas.session import SessionCreate, SessionResponse, SessionUpdate
from conftrack.services.resource_service import session_service

router = build_crud_router(
    prefix="/sessions",
    tag="Sessions",
    service=session_service,
    create_schema=SessionCreate,
    update_schema=SessionUpdate,
    response_schema=SessionResponse,
)
