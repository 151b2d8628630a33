"""Integration tests for the MongoDB mask store.

Run with::

    pytest -m integration tests/integration/test_mongodb.py -v

Requires Docker (used automatically via ``testcontainers``).
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Any

import pytest
from testcontainers.mongodb import MongoDbContainer

from maskit import HelperMask, Maskit, ParamIn, Rule
from maskit.adapters.mongodb import MongoMaskStore
from maskit.kernel.time import FrozenClock


def _run(coro: Any) -> Any:
    return asyncio.run(coro)


@pytest.fixture(scope="module")
def mongo_uri() -> str:  # type: ignore[return]
    with MongoDbContainer("mongo:7.0") as mongo:
        yield mongo.get_connection_url()


@pytest.mark.integration
class TestMongoMaskStore:
    def test_save_upsert_and_reload(self, mongo_uri: str, request: Any) -> None:
        import motor.motor_asyncio as motor_async

        db_name = request.node.name[:63]
        clock = FrozenClock(datetime(2024, 5, 1, tzinfo=UTC))
        maskit = Maskit(clock=clock)
        compiled = maskit.compile([
            Rule("name", 4),
            Rule("email", HelperMask("email"), ignore=ParamIn("role", ["admin"])),
        ])
        user = {"name": "John Doe", "email": "john@example.com"}

        async def run() -> None:
            client = motor_async.AsyncIOMotorClient(mongo_uri, tz_aware=True)
            try:
                col = client[db_name][MongoMaskStore.COLLECTION_NAME]
                await MongoMaskStore.create_indexes(col)
                store = MongoMaskStore(col)

                await maskit.save("userMask", compiled, user, {"role": "user"}, store)
                clock.advance(days=1)
                await maskit.save("userMask", compiled, user, {"role": "admin"}, store)

                assert await col.count_documents({}) == 1
                record = await store.get("userMask")
                assert record is not None
                assert record.masked_field_names == ["name"]
                assert record.created_at == datetime(2024, 5, 1, tzinfo=UTC)
                assert record.updated_at == datetime(2024, 5, 2, tzinfo=UTC)

                restored = maskit.deserialize(record.serialized_mask)
                assert restored(user, {"role": "user"}) == compiled(user, {"role": "user"})
            finally:
                client.close()

        _run(run())
