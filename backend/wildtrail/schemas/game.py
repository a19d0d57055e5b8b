"""Game API Pydantic schemas."""

from pydantic import BaseModel, Field

from wildtrail.schemas.content import Collectible, EventNode
from wildtrail.schemas.session import JourneySnapshot


class CollectionStatus(BaseModel):
    unlocked_ids: list[int]
    count: int
    total: int  # collectibles in the catalog


class GameState(BaseModel):
    stamina: int
    max_stamina: int
    currency: int
    inventory: list[int]
    can_explore: bool
    start_event_id: int
    journey: JourneySnapshot
    collection: CollectionStatus


class MakeChoiceRequest(BaseModel):
    event_id: int
    choice_index: int


class SpendRequest(BaseModel):
    amount: int = Field(ge=0)


class SpendResponse(BaseModel):
    success: bool
    currency: int


class EventListResponse(BaseModel):
    success: bool = True
    data: list[EventNode]


class CollectibleListResponse(BaseModel):
    success: bool = True
    data: list[Collectible]
