"""FastAPI dependencies shared by the route modules."""

from fastapi import HTTPException, Request

from wildtrail.services.game_service import GameService
from wildtrail.services.review_service import ReviewService, review_service


def get_game(request: Request) -> GameService:
    """The GameService built in the app lifespan."""
    game = getattr(request.app.state, "game", None)
    if game is None:
        raise HTTPException(status_code=503, detail="Game is not loaded")
    return game


def get_review_service() -> ReviewService:
    return review_service
