"""
app/api/routers/actor_router.py

Actor catalog endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.config import get_catalog_settings
from app.errors import ActorNotFoundError, InvalidInputError, RankConflictError
from app.schemas.actor import (
    ActorCreateRequest,
    ActorListResponse,
    ActorResponse,
    ActorSummaryResponse,
    ActorUpdateRequest,
)
from app.services.actor_catalog import ActorCatalog, get_actor_catalog

router = APIRouter(prefix="/actors", tags=["actors"])


@router.get("", response_model=ActorListResponse)
def list_actors(
    name_filter: str | None = Query(default=None, description="Case-sensitive name substring"),
    min_rank: int | None = Query(default=None, description="Inclusive lower rank bound"),
    max_rank: int | None = Query(default=None, description="Inclusive upper rank bound"),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    catalog: ActorCatalog = Depends(get_actor_catalog),
) -> ActorListResponse:
    """
    List actors ordered by id, filtered by name and rank range.
    """

    settings = get_catalog_settings()
    effective_page_size = min(page_size or settings.default_page_size, settings.max_page_size)
    try:
        result = catalog.list(
            name_filter=name_filter,
            min_rank=min_rank,
            max_rank=max_rank,
            page=page,
            page_size=effective_page_size,
        )
    except InvalidInputError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return ActorListResponse(
        total_actors=result.total_count,
        total_pages=result.total_pages,
        page=result.page,
        page_size=result.page_size,
        actors=[ActorSummaryResponse.model_validate(record) for record in result.items],
    )


@router.get("/{actor_id}", response_model=ActorResponse)
def get_actor(
    actor_id: int,
    catalog: ActorCatalog = Depends(get_actor_catalog),
) -> ActorResponse:
    try:
        record = catalog.get(actor_id)
    except ActorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ActorResponse.model_validate(record)


@router.post(
    "",
    response_model=ActorResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_actor(
    body: ActorCreateRequest,
    catalog: ActorCatalog = Depends(get_actor_catalog),
) -> ActorResponse:
    """
    Create an actor under a newly assigned id.

    Raises HTTP 400 on a missing name or non-positive rank and HTTP 409 when
    another actor already holds the rank.
    """

    try:
        record = catalog.create(body.to_input())
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except RankConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return ActorResponse.model_validate(record)


@router.put("/{actor_id}", response_model=ActorResponse)
def update_actor(
    actor_id: int,
    body: ActorUpdateRequest,
    catalog: ActorCatalog = Depends(get_actor_catalog),
) -> ActorResponse:
    """
    Update rank, details and type of an existing actor.
    """

    if body.id is not None and body.id != actor_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Actor ID in the request body does not match the ID in the URL.",
        )

    try:
        record = catalog.update(body.to_input(actor_id=actor_id))
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ActorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except RankConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return ActorResponse.model_validate(record)


@router.delete("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_actor(
    actor_id: int,
    catalog: ActorCatalog = Depends(get_actor_catalog),
) -> Response:
    try:
        catalog.delete(actor_id)
    except ActorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
