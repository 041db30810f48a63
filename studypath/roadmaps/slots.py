"""
Single-key storage slots.

The roadmap collection lives in one slot as one JSON document. A slot only
reads and writes that text; parsing and validation belong to RoadmapStore.

Backends:
- SqlSlot: one row of the kv_slots table (SQLite by default)
- RedisSlot: one Redis string key
- MemorySlot: a dict, for tests and throwaway sessions
"""
from abc import ABC, abstractmethod

import redis
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from studypath.db.models.kv_slot import KeyValueSlot
from studypath.settings import Settings, settings as default_settings


class Slot(ABC):
    key: str

    @abstractmethod
    def read(self) -> str | None:
        """Return the stored text, or None when the key was never written."""
        raise NotImplementedError

    @abstractmethod
    def write(self, value: str) -> None:
        raise NotImplementedError


class MemorySlot(Slot):
    def __init__(self, key: str = "roadmaps", initial: str | None = None):
        self.key = key
        self.values: dict[str, str] = {}
        if initial is not None:
            self.values[key] = initial

    def read(self) -> str | None:
        return self.values.get(self.key)

    def write(self, value: str) -> None:
        self.values[self.key] = value


class SqlSlot(Slot):
    def __init__(self, database_url: str | None = None, key: str = "roadmaps",
    engine: Engine | None = None):
        if engine is None and database_url is None:
            raise ValueError("SqlSlot needs a database_url or an engine")
        self.key = key
        self.engine = engine or create_engine(database_url, pool_pre_ping=True)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)
        self._table_ready = False

    def _ensure_table(self) -> None:
        # Created lazily so a down database surfaces as a read/write error
        if not self._table_ready:
            KeyValueSlot.__table__.create(self.engine, checkfirst=True)
            self._table_ready = True

    def read(self) -> str | None:
        self._ensure_table()
        db = self.SessionLocal()
        try:
            row = db.get(KeyValueSlot, self.key)
            return row.value if row else None
        finally:
            db.close()

    def write(self, value: str) -> None:
        self._ensure_table()
        db = self.SessionLocal()
        try:
            row = db.get(KeyValueSlot, self.key)
            if row:
                row.value = value
            else:
                db.add(KeyValueSlot(key=self.key, value=value))
            db.commit()
        finally:
            db.close()


class RedisSlot(Slot):
    def __init__(self, redis_url: str | None = None, key: str = "roadmaps",
    client: redis.Redis | None = None):
        if client is None and redis_url is None:
            raise ValueError("RedisSlot needs a redis_url or a client")
        self.key = key
        # decode_responses=True returns strings instead of bytes
        self.client = client or redis.Redis.from_url(redis_url, decode_responses=True)

    def read(self) -> str | None:
        value = self.client.get(self.key)
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def write(self, value: str) -> None:
        self.client.set(self.key, value)


def get_slot(settings: Settings | None = None) -> Slot:
    settings = settings or default_settings
    backend = settings.storage_backend.lower()

    if backend == "sql":
        return SqlSlot(database_url=settings.database_url, key=settings.roadmaps_key)
    if backend == "redis":
        return RedisSlot(redis_url=settings.redis_url, key=settings.roadmaps_key)
    if backend == "memory":
        return MemorySlot(key=settings.roadmaps_key)

    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
