"""
ConfTrack Backend: Persistence Gateway
======================================

What:  One generic repository per ORM model with create / list / find / get /
       update / delete.
How:   Every datastore call goes through run_bounded(), so timeouts and
       driver errors surface as DatabaseError / ConstraintViolationError.
       Repositories flush but never commit; transaction boundaries belong to
       the caller (the request-scoped session or the webhook service).
Who:   Used by ResourceService (CRUD) and RecordingWebhookService.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conftrack.database import Base, run_bounded
from conftrack.exceptions import NotFoundError
from conftrack.models.types import as_utc

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _normalize(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Coerce datetime values to aware UTC so comparisons never mix naive/aware."""
    return {
        key: as_utc(value) if isinstance(value, datetime) else value
        for key, value in fields.items()
    }


class Repository(Generic[ModelT]):
    """
    Data access for a single entity type.

    Args:
        model:         ORM class managed by this repository
        resource_name: Entity name used in NotFoundError messages
    """

    def __init__(self, model: Type[ModelT], resource_name: str):
        self.model = model
        self.resource_name = resource_name

    async def create(self, db: AsyncSession, **fields: Any) -> ModelT:
        """Insert a row and flush so the generated id is populated."""
        entity = self.model(**_normalize(fields))
        db.add(entity)
        await run_bounded(db.flush(), f"{self.resource_name}.create")
        logger.debug("Created %s id=%s", self.resource_name, entity.id)
        return entity

    async def list(self, db: AsyncSession, limit: int = 100, offset: int = 0) -> List[ModelT]:
        query = (
            select(self.model)
            .order_by(self.model.id)
            .limit(limit)
            .offset(offset)
        )
        result = await run_bounded(db.execute(query), f"{self.resource_name}.list")
        return list(result.scalars().all())

    async def find(self, db: AsyncSession, entity_id: int) -> Optional[ModelT]:
        """Return the row or None."""
        result = await run_bounded(
            db.execute(select(self.model).where(self.model.id == entity_id)),
            f"{self.resource_name}.find",
        )
        return result.scalar_one_or_none()

    async def get(self, db: AsyncSession, entity_id: int) -> ModelT:
        """Return the row or raise NotFoundError naming the entity and id."""
        entity = await self.find(db, entity_id)
        if entity is None:
            raise NotFoundError(resource=self.resource_name, resource_id=str(entity_id))
        return entity

    async def update(
        self,
        db: AsyncSession,
        entity_id: int,
        changes: Mapping[str, Any],
    ) -> ModelT:
        """
        Merge `changes` into the row and advance updated_at.

        Keys not present in `changes` are left untouched; an empty mapping
        still counts as a mutation for updated_at.
        """
        entity = await self.get(db, entity_id)
        for key, value in _normalize(changes).items():
            setattr(entity, key, value)
        if hasattr(entity, "touch"):
            entity.touch()
        await run_bounded(db.flush(), f"{self.resource_name}.update")
        return entity

    async def delete(self, db: AsyncSession, entity_id: int) -> ModelT:
        """Remove the row and return it. Restricted while dependents exist."""
        entity = await self.get(db, entity_id)
        await run_bounded(db.delete(entity), f"{self.resource_name}.delete")
        await run_bounded(db.flush(), f"{self.resource_name}.delete")
        return entity
