"""Storage service - loads and saves the session record and the collection record.

The two records live under separate keys and have separate lifecycles: a new
run rewrites the session record only, the collection record is touched by
unlocks and by the explicit full erase.
"""

import json
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from wildtrail.config import settings
from wildtrail.core.errors import StorageCorrupt
from wildtrail.db.backends import RecordBackend
from wildtrail.schemas.session import CollectionRecord, SessionRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """One typed JSON record under one key."""

    def __init__(
        self,
        backend: RecordBackend,
        key: str,
        model: type[RecordT],
        default_factory: Callable[[], RecordT],
    ):
        self.backend = backend
        self.key = key
        self.model = model
        self.default_factory = default_factory

    def load(self) -> RecordT:
        """Return the stored record, or the default one if it is missing or corrupt."""
        raw = self.backend.read(self.key)
        if raw is None:
            logger.info("No saved %r record, starting from defaults", self.key)
            return self.default_factory()
        try:
            return self.decode(raw)
        except StorageCorrupt as exc:
            logger.warning("Discarding corrupt %r record: %s", self.key, exc)
            return self.default_factory()

    def save(self, record: RecordT) -> None:
        payload = record.model_dump(mode="json", by_alias=True)
        payload["savedAt"] = datetime.now(timezone.utc).isoformat()
        self.backend.write(self.key, json.dumps(payload, ensure_ascii=False))

    def clear(self) -> None:
        self.backend.delete(self.key)

    def decode(self, raw: str | bytes) -> RecordT:
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise StorageCorrupt(f"not valid JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise StorageCorrupt(f"expected a JSON object, got {type(data).__name__}")
        try:
            return self.model.model_validate(data)
        except ValidationError as exc:
            raise StorageCorrupt(f"invalid fields ({exc.error_count()} errors)") from exc


def default_session_record(max_stamina: int | None = None) -> SessionRecord:
    return SessionRecord(
        stamina=settings.MAX_STAMINA if max_stamina is None else max_stamina,
        currency=settings.STARTING_CURRENCY,
        inventory=[],
    )


def session_store(
    backend: RecordBackend, key: str | None = None, max_stamina: int | None = None
) -> RecordStore[SessionRecord]:
    return RecordStore(
        backend,
        key or settings.SESSION_RECORD_KEY,
        SessionRecord,
        lambda: default_session_record(max_stamina),
    )


def collection_store(backend: RecordBackend, key: str | None = None) -> RecordStore[CollectionRecord]:
    return RecordStore(
        backend,
        key or settings.COLLECTION_RECORD_KEY,
        CollectionRecord,
        CollectionRecord,
    )
