"""
ConfTrack Backend: CRUD Router Factory
======================================

What:  Builds the five standard endpoints for a resource.
How:   The four resources share one shape, so each route module calls
       build_crud_router() with its schemas and service instead of repeating
       the handlers.

Endpoints per resource (prefix e.g. "/conferences"):
    POST   /          create            → 201
    GET    /          list (paginated)  → 200
    GET    /{id}      get               → 200 | 404
    PATCH  /{id}      partial update    → 200 | 404
    DELETE /{id}      delete            → 200 | 404 | 409
"""

from typing import List, Type

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from conftrack.database import get_db_session
from conftrack.schemas.common import ErrorResponse
from conftrack.services.resource_service import ResourceService


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    service: ResourceService,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
) -> APIRouter:
    """
    Create an APIRouter exposing create / list / get / update / delete.

    Args:
        prefix:          URL prefix, e.g. "/sessions"
        tag:             OpenAPI tag
        service:         ResourceService bound to the resource's repository
        create_schema:   Body model for POST
        update_schema:   Body model for PATCH (all fields optional)
        response_schema: Model returned by every endpoint
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    name = service.resource_name
    not_found = {404: {"description": f"{name} not found", "model": ErrorResponse}}
    conflict = {409: {"description": "Related records conflict", "model": ErrorResponse}}

    @router.post(
        "",
        status_code=201,
        response_model=response_schema,
        responses=conflict,
        summary=f"Create a {name.lower()}",
    )
    async def create_resource(
        payload: create_schema,
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.create(db, payload)

    @router.get(
        "",
        response_model=List[response_schema],
        summary=f"List {name.lower()}s",
    )
    async def list_resources(
        limit: int = Query(default=100, ge=1, le=500, description="Maximum rows to return"),
        offset: int = Query(default=0, ge=0, description="Rows to skip"),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.list(db, limit=limit, offset=offset)

    @router.get(
        "/{entity_id}",
        response_model=response_schema,
        responses=not_found,
        summary=f"Get a {name.lower()} by ID",
    )
    async def get_resource(
        entity_id: int,
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.get(db, entity_id)

    @router.patch(
        "/{entity_id}",
        response_model=response_schema,
        responses={**not_found, **conflict},
        summary=f"Update a {name.lower()}",
    )
    async def update_resource(
        entity_id: int,
        payload: update_schema,
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.update(db, entity_id, payload)

    @router.delete(
        "/{entity_id}",
        response_model=response_schema,
        responses={**not_found, **conflict},
        summary=f"Delete a {name.lower()}",
    )
    async def delete_resource(
        entity_id: int,
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.delete(db, entity_id)

    return router
