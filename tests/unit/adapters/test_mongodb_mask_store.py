"""Unit tests for the MongoDB mask store – no running MongoDB required."""
from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from maskit.adapters.mongodb import MongoMaskStore
from maskit.application.masking import MaskRecord
from maskit.config import MaskitSettings
from maskit.kernel.errors import PersistenceError

T0 = datetime(2024, 5, 1, tzinfo=UTC)
T1 = datetime(2024, 5, 2, tzinfo=UTC)


def _record(**overrides: Any) -> MaskRecord:
    fields: dict[str, Any] = {
        "name": "userMask",
        "masked_field_names": ["name"],
        "original": {"name": "John"},
        "param": {"role": "user"},
        "serialized_mask": '{"format": "maskit.compiled-mask"}',
        "created_at": T0,
        "updated_at": T1,
    }
    fields.update(overrides)
    return MaskRecord(**fields)


def _collection() -> MagicMock:
    col = MagicMock()
    col.update_one = AsyncMock()
    col.find_one = AsyncMock(return_value=None)
    col.create_index = AsyncMock()
    return col


class TestMongoMaskStore:
    def test_save_upserts_by_name(self) -> None:
        col = _collection()
        asyncio.run(MongoMaskStore(col).save(_record()))
        col.update_one.assert_awaited_once_with(
            {"name": "userMask"},
            {
                "$set": {
                    "name": "userMask",
                    "maskedFieldNames": ["name"],
                    "original": {"name": "John"},
                    "param": {"role": "user"},
                    "serializedMask": '{"format": "maskit.compiled-mask"}',
                    "updatedAt": T1,
                },
                "$setOnInsert": {"createdAt": T0},
            },
            upsert=True,
        )

    def test_get_returns_none_for_missing(self) -> None:
        col = _collection()
        assert asyncio.run(MongoMaskStore(col).get("nope")) is None
        col.find_one.assert_awaited_once_with({"name": "nope"})

    def test_get_maps_document(self) -> None:
        col = _collection()
        col.find_one = AsyncMock(return_value={
            "_id": "abc",
            "name": "userMask",
            "maskedFieldNames": ["name"],
            "original": {"name": "John"},
            "param": {"role": "user"},
            "serializedMask": '{"format": "maskit.compiled-mask"}',
            "createdAt": T0,
            "updatedAt": T1,
        })
        assert asyncio.run(MongoMaskStore(col).get("userMask")) == _record()

    def test_driver_errors_are_wrapped(self) -> None:
        col = _collection()
        boom = RuntimeError("connection refused")
        col.update_one = AsyncMock(side_effect=boom)
        with pytest.raises(PersistenceError) as exc_info:
            asyncio.run(MongoMaskStore(col).save(_record()))
        assert exc_info.value.cause is boom
        assert exc_info.value.operation == "save"

    def test_get_errors_are_wrapped(self) -> None:
        col = _collection()
        col.find_one = AsyncMock(side_effect=RuntimeError("timeout"))
        with pytest.raises(PersistenceError):
            asyncio.run(MongoMaskStore(col).get("userMask"))

    def test_create_indexes(self) -> None:
        col = _collection()
        asyncio.run(MongoMaskStore.create_indexes(col))
        col.create_index.assert_awaited_once_with("name", unique=True, name="idx_compiled_mask_name")

    def test_from_settings(self) -> None:
        import maskit.adapters.mongodb.mask_store as store_mod

        fake_motor = MagicMock()
        client = fake_motor.AsyncIOMotorClient.return_value
        settings = MaskitSettings(mongo_uri="mongodb://db:27017", mongo_database="audit")

        with patch.object(store_mod, "_require_motor", return_value=fake_motor):
            MongoMaskStore.from_settings(settings)

        fake_motor.AsyncIOMotorClient.assert_called_once_with("mongodb://db:27017")
        client.__getitem__.assert_called_once_with("audit")
        client.__getitem__.return_value.__getitem__.assert_called_once_with("compiledMasks")
