"""
app/schemas/actor.py

Request and response schemas for actor catalog endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.domain.actor import ActorInput


class ActorCreateRequest(BaseModel):
    """
    Payload for creating an actor. A supplied `id` is ignored.
    """

    id: int | None = None
    name: str | None = None
    rank: int = 0
    details: str | None = None
    type: str | None = None

    def to_input(self, *, actor_id: int | None = None) -> ActorInput:
        return ActorInput(
            id=actor_id,
            name=self.name,
            rank=self.rank,
            details=self.details,
            type=self.type,
        )


class ActorUpdateRequest(ActorCreateRequest):
    """
    Payload for updating an actor. `name` must be present but is never changed.
    """


class ActorResponse(BaseModel):
    id: int
    name: str
    rank: int
    details: str | None = None
    type: str | None = None

    model_config = {"from_attributes": True}


class ActorSummaryResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class ActorListResponse(BaseModel):
    """
    One page of actors with totals for the whole filtered set.
    """

    total_actors: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    actors: list[ActorSummaryResponse] = Field(default_factory=list)
