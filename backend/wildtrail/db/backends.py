"""Key/value backends the record stores write through to."""

from typing import Protocol

import redis
from sqlalchemy.orm import Session, sessionmaker

from wildtrail.models.saved_record import SavedRecord


class RecordBackend(Protocol):
    def read(self, key: str) -> str | None: ...

    def write(self, key: str, payload: str) -> None: ...

    def delete(self, key: str) -> None: ...


class SqlRecordBackend:
    """One ``saved_records`` row per key."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def read(self, key: str) -> str | None:
        with self.session_factory() as db:
            record = db.get(SavedRecord, key)
            return record.payload if record else None

    def write(self, key: str, payload: str) -> None:
        with self.session_factory() as db:
            record = db.get(SavedRecord, key)
            if record is None:
                db.add(SavedRecord(key=key, payload=payload))
            else:
                record.payload = payload
            db.commit()

    def delete(self, key: str) -> None:
        with self.session_factory() as db:
            record = db.get(SavedRecord, key)
            if record is not None:
                db.delete(record)
                db.commit()


class RedisRecordBackend:
    """One Redis string per key, no expiry."""

    def __init__(self, client: redis.Redis):
        self.redis = client

    def read(self, key: str) -> str | None:
        return self.redis.get(key)

    def write(self, key: str, payload: str) -> None:
        self.redis.set(key, payload)

    def delete(self, key: str) -> None:
        self.redis.delete(key)
