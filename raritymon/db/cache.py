"""
Content-addressed cache of item lookups.

Maps the SHA-256 fingerprint of "collection:id" to the serialized item JSON.
Every get and put runs in its own transaction, so a reader never sees a
partially written value. Nothing spans fetch, parse and store: two concurrent
misses for the same item may both write, and the later write wins.
"""

import hashlib
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from sqlalchemy import select, text
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from raritymon.db.database import create_engine, create_session_factory, init_db
from raritymon.models.db import RarityCacheEntryDB
from raritymon.models.errors import StoreError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def fingerprint(collection: str, item_id: int | str) -> bytes:
    """Deterministic 32-byte cache key for a collection item."""
    return hashlib.sha256(f"{collection}:{item_id}".encode()).digest()


class RarityCache:
    """
    Persistent key-value store for serialized items.

    Args:
        engine: Async engine for the cache database
        max_age: Entries last written longer ago than this are reported as
            misses. None keeps entries forever.
        clock: Returns the current UTC time; replaceable in tests
    """

    fingerprint = staticmethod(fingerprint)

    def __init__(
        self,
        engine: AsyncEngine,
        max_age: timedelta | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.engine = engine
        self.max_age = max_age
        self.clock = clock
        self._session_factory = create_session_factory(engine)
        self._initialized = False

    @classmethod
    def from_url(
        cls, database_url: str, max_age: timedelta | None = None, echo: bool = False
    ) -> "RarityCache":
        """Build a cache with its own engine for the given database URL."""
        return cls(create_engine(database_url, echo=echo), max_age=max_age)

    async def init(self) -> None:
        """Create the cache table if it does not exist."""
        try:
            await init_db(self.engine)
        except SQLAlchemyError as e:
            raise StoreError(f"failed to initialize cache database: {e}") from e
        self._initialized = True

    async def get(self, key: bytes) -> bytes | None:
        """
        Look up a cached payload.

        Returns None on a miss, including when the entry is older than
        max_age or the table has not been created yet.

        Raises:
            StoreError: If the database cannot be read
        """
        if not self._initialized:
            await self.init()

        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(RarityCacheEntryDB).where(RarityCacheEntryDB.fingerprint == key)
                )
                entry = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StoreError(f"failed to read cache entry: {e}") from e

        if entry is None:
            return None

        if self.max_age is not None and self._is_stale(entry.updated_at, self.max_age):
            logger.info("Cache entry %s expired", key.hex()[:12])
            return None

        return bytes(entry.payload)

    async def put(self, key: bytes, payload: bytes) -> None:
        """
        Store a payload, replacing any previous value for the key.

        Raises:
            StoreError: If the database cannot be written
        """
        if not self._initialized:
            await self.init()

        now = self.clock()
        statement = insert(RarityCacheEntryDB).values(
            fingerprint=key,
            payload=payload,
            created_at=now,
            updated_at=now,
        )
        statement = statement.on_conflict_do_update(
            index_elements=[RarityCacheEntryDB.fingerprint],
            set_={"payload": statement.excluded.payload, "updated_at": now},
        )

        try:
            async with self._session_factory() as session:
                await session.execute(statement)
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"failed to write cache entry: {e}") from e

        logger.info("Cached %d bytes under %s", len(payload), key.hex()[:12])

    async def ping(self) -> None:
        """
        Check database connectivity.

        Raises:
            StoreError: If the database is unreachable
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StoreError(f"cache database unavailable: {e}") from e

    async def close(self) -> None:
        """Dispose of the engine and its connections."""
        await self.engine.dispose()

    def _is_stale(self, updated_at: datetime, max_age: timedelta) -> bool:
        # SQLite hands back naive datetimes; they are written as UTC
        if updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=timezone.utc)
        return self.clock() - updated_at > max_age
