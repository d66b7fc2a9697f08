"""
ConfTrack Backend: CRUD Resource Service
========================================

What:  create / list / get / update / delete for one entity, returning
       response schemas.
How:   Delegates storage to a Repository and commits each mutation so the
       returned row reflects what is persisted. Not-found propagates as
       NotFoundError; every other failure propagates unchanged.
Who:   Called by the router built in routes/crud.py for each resource.
"""

import logging
from typing import Generic, List, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from conftrack.database import run_bounded
from conftrack.repositories import (
    Repository,
    conference_repository,
    participant_repository,
    recording_repository,
    session_repository,
)
from conftrack.schemas.conference import ConferenceResponse
from conftrack.schemas.participant import ParticipantResponse
from conftrack.schemas.recording import RecordingResponse
from conftrack.schemas.session import SessionResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ResourceService(Generic[ResponseT]):
    """Stateless CRUD orchestration for one resource."""

    def __init__(self, repository: Repository, response_schema: Type[ResponseT]):
        self.repository = repository
        self.response_schema = response_schema

    @property
    def resource_name(self) -> str:
        return self.repository.resource_name

    def _to_response(self, entity) -> ResponseT:
        return self.response_schema.model_validate(entity)

    async def create(self, db: AsyncSession, payload: BaseModel) -> ResponseT:
        entity = await self.repository.create(db, **payload.model_dump())
        await run_bounded(db.commit(), f"{self.resource_name}.create")
        logger.info("%s %s created", self.resource_name, entity.id)
        return self._to_response(entity)

    async def list(self, db: AsyncSession, limit: int = 100, offset: int = 0) -> List[ResponseT]:
        entities = await self.repository.list(db, limit=limit, offset=offset)
        return [self._to_response(entity) for entity in entities]

    async def get(self, db: AsyncSession, entity_id: int) -> ResponseT:
        entity = await self.repository.get(db, entity_id)
        return self._to_response(entity)

    async def update(self, db: AsyncSession, entity_id: int, payload: BaseModel) -> ResponseT:
        """Partial merge: only fields the client actually sent are applied."""
        changes = payload.model_dump(exclude_unset=True)
        entity = await self.repository.update(db, entity_id, changes)
        await run_bounded(db.commit(), f"{self.resource_name}.update")
        logger.info(
            "%s %s updated: fields=%s", self.resource_name, entity_id, sorted(changes)
        )
        return self._to_response(entity)

    async def delete(self, db: AsyncSession, entity_id: int) -> ResponseT:
        entity = await self.repository.delete(db, entity_id)
        # Build the response before commit; the instance is detached afterwards
        response = self._to_response(entity)
        await run_bounded(db.commit(), f"{self.resource_name}.delete")
        logger.info("%s %s deleted", self.resource_name, entity_id)
        return response


# ── Singleton Instances ───────────────────────────────────────────────────
conference_service = ResourceService(conference_repository, ConferenceResponse)
recording_service = ResourceService(recording_repository, RecordingResponse)
session_service = ResourceService(session_repository, SessionResponse)
participant_service = ResourceService(participant_repository, ParticipantResponse)
