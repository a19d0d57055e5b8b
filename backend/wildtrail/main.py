"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wildtrail.config import settings
from wildtrail.db.redis import close_redis
from wildtrail.services.content_service import content_service
from wildtrail.services.game_service import create_game_service


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: a ContentError here is fatal, no run may start on broken content
    configure_logging()
    graph = content_service.build_graph()
    app.state.game = create_game_service(graph)
    yield
    # Shutdown: close connections
    close_redis()


app = FastAPI(
    title="Wildtrail API",
    description="Local backend for Wildtrail - a single-player forest exploration game",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # TODO: restrict once the web client has a fixed origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routes ---
from wildtrail.api.routes import content, game, review  # noqa: E402

app.include_router(content.router, prefix="/api", tags=["content"])
app.include_router(game.router, prefix="/api/game", tags=["game"])
app.include_router(review.router, prefix="/api", tags=["review"])


@app.get("/health")
async def health_check():
    return {"status": "ok"}
