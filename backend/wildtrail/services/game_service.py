"""Game service - owns the event graph, the session, the collection and their stores.

One GameService is built per process (app lifespan or CLI) and passed to
whoever needs it. Every committed change to the session resources or the
collection is written straight through to its record store.
"""

import logging
import random

from wildtrail.config import settings
from wildtrail.core.collection import CollectionRegistry
from wildtrail.core.errors import StaminaExhausted
from wildtrail.core.event_graph import EventGraph
from wildtrail.core.resolver import ChoiceResolver
from wildtrail.core.session import SessionState
from wildtrail.db.backends import RecordBackend, RedisRecordBackend, SqlRecordBackend
from wildtrail.schemas.game import CollectionStatus, GameState
from wildtrail.schemas.session import CollectionRecord, JourneySnapshot, Resolution, SessionRecord
from wildtrail.services.storage_service import RecordStore, collection_store, session_store

logger = logging.getLogger(__name__)


class GameService:
    def __init__(
        self,
        graph: EventGraph,
        sessions: RecordStore[SessionRecord],
        collections: RecordStore[CollectionRecord],
        *,
        max_stamina: int | None = None,
        reset_currency: int | None = None,
        inventory_enabled: bool | None = None,
        rng: random.Random | None = None,
    ):
        self.graph = graph
        self.sessions = sessions
        self.collections = collections
        self.max_stamina = max_stamina or settings.MAX_STAMINA
        self.reset_currency = settings.RESET_CURRENCY if reset_currency is None else reset_currency
        if inventory_enabled is None:
            inventory_enabled = settings.INVENTORY_ENABLED

        self.session = SessionState.from_record(sessions.load(), self.max_stamina, inventory_enabled)
        self.collection = CollectionRegistry(collections.load().unlocked_ids)
        self.session.subscribe(self._save_session)
        self.collection.subscribe(self._save_collection)
        self.resolver = ChoiceResolver(graph, self.session, self.collection, rng)

    def _save_session(self, _session: SessionState) -> None:
        self.sessions.save(self.session.to_record())

    def _save_collection(self, _collection: CollectionRegistry) -> None:
        self.collections.save(CollectionRecord(unlocked_ids=list(self.collection.unlocked_ids)))

    # --- Queries ---

    def can_explore(self) -> bool:
        return self.session.stamina.has_stamina()

    def snapshot(self) -> JourneySnapshot:
        return self.session.journey.snapshot()

    def state(self) -> GameState:
        return GameState(
            stamina=self.session.stamina.value,
            max_stamina=self.max_stamina,
            currency=self.session.currency,
            inventory=sorted(self.session.inventory.items),
            can_explore=self.can_explore(),
            start_event_id=self.graph.start_event_id,
            journey=self.snapshot(),
            collection=self.collection_status(),
        )

    def collection_status(self) -> CollectionStatus:
        return CollectionStatus(
            unlocked_ids=list(self.collection.unlocked_ids),
            count=self.collection.count(),
            total=self.graph.collectible_count,
        )

    # --- Actions ---

    def resolve_choice(self, event_id: int, choice_index: int) -> Resolution:
        """Resolve a choice if the stamina gate allows another event."""
        if not self.can_explore():
            raise StaminaExhausted()
        return self.resolver.resolve_choice(event_id, choice_index)

    def spend(self, amount: int) -> bool:
        return self.session.wallet.spend(amount)

    def start_new_run(self) -> None:
        """Reset the session (stamina, currency, inventory, journey). The collection is kept."""
        self.session.reset(self.reset_currency)
        logger.info("New run started; %d collectibles kept", self.collection.count())

    def erase_all_progress(self) -> None:
        """Wipe both records: the session back to defaults and the whole collection."""
        self.session.reset(settings.STARTING_CURRENCY)
        self.collection.erase()
        logger.info("All progress erased")


def make_backend(kind: str | None = None) -> RecordBackend:
    kind = kind or settings.STORAGE_BACKEND
    if kind == "redis":
        from wildtrail.db.redis import get_redis_client

        return RedisRecordBackend(get_redis_client())
    if kind == "sql":
        from wildtrail.db.database import SessionLocal, init_db

        init_db()
        return SqlRecordBackend(SessionLocal)
    raise ValueError(f"Unknown STORAGE_BACKEND: {kind!r}")


def create_game_service(graph: EventGraph, backend: RecordBackend | None = None) -> GameService:
    """Wire a GameService from settings."""
    backend = backend or make_backend()
    return GameService(
        graph,
        session_store(backend, max_stamina=settings.MAX_STAMINA),
        collection_store(backend),
        rng=random.Random(settings.RNG_SEED),
    )
