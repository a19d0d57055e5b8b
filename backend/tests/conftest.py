"""Shared test fixtures - uses in-memory SQLite for isolated testing."""

import random

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wildtrail.core.event_graph import EventGraph
from wildtrail.db.backends import SqlRecordBackend
from wildtrail.db.database import Base
from wildtrail.schemas.content import Choice, Collectible, EventNode, Outcome
from wildtrail.services.game_service import GameService
from wildtrail.services.storage_service import collection_store, session_store

# In-memory SQLite shared across connections (no files needed)
test_engine = create_engine(
    "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
)
test_session_factory = sessionmaker(test_engine, expire_on_commit=False)


class FixedDraw(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def make_choice(label: str, *outcomes: Outcome) -> Choice:
    return Choice(label=label, outcomes=outcomes)


@pytest.fixture(autouse=True)
def setup_db():
    """Create all tables before each test, drop after."""
    # Import all models so Base.metadata knows about them
    import wildtrail.models  # noqa: F401

    Base.metadata.create_all(test_engine)
    yield
    Base.metadata.drop_all(test_engine)


@pytest.fixture
def fixed_draw():
    """The FixedDraw class, for tests that need to steer outcome sampling."""
    return FixedDraw


@pytest.fixture
def backend():
    return SqlRecordBackend(test_session_factory)


@pytest.fixture
def events():
    """Two events linked both ways; event 2's second choice is a 50/50 gamble."""
    return [
        EventNode(
            id=1,
            name="Trailhead",
            text="The path splits.",
            scene="forest",
            choices=(
                make_choice("Follow the birds", Outcome(text="A woodpecker.", reward=10, next_event_id=2, collectible_id=17)),
                make_choice("Kick the signpost", Outcome(text="Ouch.", reward=-50, next_event_id=2)),
            ),
        ),
        EventNode(
            id=2,
            name="Stream",
            text="A shallow stream.",
            scene="river",
            choices=(
                make_choice("Wade across", Outcome(text="A heron.", reward=10, next_event_id=1, collectible_id=3)),
                make_choice(
                    "Wait for dusk",
                    Outcome(text="The white beast!", weight=0.5, reward=20, collectible_id=35),
                    Outcome(text="Only mosquitoes.", weight=0.5, reward=0, next_event_id=1),
                ),
            ),
        ),
    ]


@pytest.fixture
def collectibles():
    return [
        Collectible(id=3, name="Grey Heron", description="Patient fisher."),
        Collectible(id=17, name="Eurasian Beaver", description="Builds dams."),
        Collectible(id=35, name="White Beast", description="Rarely seen."),
    ]


@pytest.fixture
def graph(events, collectibles):
    return EventGraph(events, collectibles)


@pytest.fixture
def make_game(graph, backend):
    """Factory for GameServices sharing the test store (so reloads can be tested)."""

    def _make(rng: random.Random | None = None) -> GameService:
        return GameService(
            graph,
            session_store(backend, max_stamina=5),
            collection_store(backend),
            max_stamina=5,
            reset_currency=100,
            inventory_enabled=False,
            rng=rng or FixedDraw(0.0),
        )

    return _make


@pytest.fixture
def game(make_game):
    return make_game()


@pytest.fixture
async def client(game):
    """Async HTTP test client with the test game injected."""
    from wildtrail.api.deps import get_game
    from wildtrail.main import app

    app.dependency_overrides[get_game] = lambda: game
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
