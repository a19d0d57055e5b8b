"""Content endpoints - the event and collectible catalog."""

from fastapi import APIRouter, Depends

from wildtrail.api.deps import get_game
from wildtrail.schemas.content import SceneTag
from wildtrail.schemas.game import CollectibleListResponse, EventListResponse
from wildtrail.services.game_service import GameService

router = APIRouter()


@router.get("/events", response_model=EventListResponse)
async def list_events(scene: SceneTag | None = None, game: GameService = Depends(get_game)):
    """All authored events, optionally limited to one scene."""
    events = game.graph.events_in_scene(scene) if scene else game.graph.events()
    return EventListResponse(data=events)


@router.get("/collections", response_model=CollectibleListResponse)
async def list_collections(game: GameService = Depends(get_game)):
    """All collectibles with their derived rarity."""
    return CollectibleListResponse(data=game.graph.collectibles())
