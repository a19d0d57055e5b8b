"""Game endpoints - resolve choices, spend currency, start a new run, erase progress."""

from fastapi import APIRouter, Depends, HTTPException

from wildtrail.api.deps import get_game
from wildtrail.core.errors import InvalidChoiceIndex, InvalidEventId, StaminaExhausted
from wildtrail.schemas.game import (
    CollectionStatus,
    GameState,
    MakeChoiceRequest,
    SpendRequest,
    SpendResponse,
)
from wildtrail.schemas.session import JourneySnapshot, Resolution
from wildtrail.services.game_service import GameService

router = APIRouter()


@router.get("/state", response_model=GameState)
async def get_state(game: GameService = Depends(get_game)):
    """Current session, journey and collection."""
    return game.state()


@router.post("/choice", response_model=Resolution)
async def make_choice(req: MakeChoiceRequest, game: GameService = Depends(get_game)):
    """Resolve one choice of an event and return its outcome."""
    try:
        return game.resolve_choice(req.event_id, req.choice_index)
    except InvalidEventId as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except InvalidChoiceIndex as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except StaminaExhausted as exc:
        raise HTTPException(status_code=409, detail=str(exc))


@router.post("/spend", response_model=SpendResponse)
async def spend(req: SpendRequest, game: GameService = Depends(get_game)):
    """Spend currency; refused (success=false) when the balance is too low."""
    success = game.spend(req.amount)
    return SpendResponse(success=success, currency=game.session.currency)


@router.post("/reset", response_model=GameState)
async def start_new_run(game: GameService = Depends(get_game)):
    """Start a new run. Collected items are kept."""
    game.start_new_run()
    return game.state()


@router.post("/erase", response_model=GameState)
async def erase_progress(game: GameService = Depends(get_game)):
    """Erase everything, including the collection."""
    game.erase_all_progress()
    return game.state()


@router.get("/journey", response_model=JourneySnapshot)
async def get_journey(game: GameService = Depends(get_game)):
    return game.snapshot()


@router.get("/collection", response_model=CollectionStatus)
async def get_collection(game: GameService = Depends(get_game)):
    return game.collection_status()
