"""MongoDB adapter – MongoMaskStore."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from maskit.application.masking.store import CompiledMaskStore, MaskRecord
from maskit.kernel.errors import PersistenceError

if TYPE_CHECKING:
    from maskit.config.settings import MaskitSettings


def _require_motor() -> Any:
    try:
        import motor.motor_asyncio as motor_async
        return motor_async
    except ImportError as exc:
        raise ImportError("Install 'maskit[mongodb]' to use the MongoDB mask store") from exc


class MongoMaskStore(CompiledMaskStore):
    """MongoDB-backed store of named compiled masks.

    Documents live in the ``compiledMasks`` collection by default and are
    keyed by ``name``::

        {name, maskedFieldNames, original, param, serializedMask,
         createdAt, updatedAt}

    ``createdAt`` is only written when a name is first inserted.  Call
    :meth:`create_indexes` once on startup to add the unique ``name`` index.
    """

    COLLECTION_NAME = "compiledMasks"

    def __init__(self, collection: Any) -> None:
        self._col = collection

    @classmethod
    def from_settings(cls, settings: MaskitSettings) -> MongoMaskStore:
        """Open a motor client for ``settings.mongo_uri`` and bind the collection."""
        motor_async = _require_motor()
        client = motor_async.AsyncIOMotorClient(settings.mongo_uri)
        return cls(client[settings.mongo_database][settings.mongo_collection])

    # ------------------------------------------------------------------
    # Index management
    # ------------------------------------------------------------------

    @classmethod
    async def create_indexes(cls, collection: Any) -> None:
        """Idempotent."""
        await collection.create_index("name", unique=True, name="idx_compiled_mask_name")

    # ------------------------------------------------------------------
    # CompiledMaskStore interface
    # ------------------------------------------------------------------

    async def save(self, record: MaskRecord) -> None:
        doc = self._to_doc(record)
        created_at = doc.pop("createdAt")
        try:
            await self._col.update_one(
                {"name": record.name},
                {"$set": doc, "$setOnInsert": {"createdAt": created_at}},
                upsert=True,
            )
        except Exception as exc:
            raise PersistenceError("save", record.name, cause=exc) from exc

    async def get(self, name: str) -> MaskRecord | None:
        try:
            doc = await self._col.find_one({"name": name})
        except Exception as exc:
            raise PersistenceError("get", name, cause=exc) from exc
        return self._from_doc(doc) if doc is not None else None

    # ------------------------------------------------------------------
    # (De)serialisation helpers
    # ------------------------------------------------------------------

    def _to_doc(self, record: MaskRecord) -> dict[str, Any]:
        return {
            "name": record.name,
            "maskedFieldNames": list(record.masked_field_names),
            "original": record.original,
            "param": record.param,
            "serializedMask": record.serialized_mask,
            "createdAt": record.created_at,
            "updatedAt": record.updated_at,
        }

    def _from_doc(self, doc: dict[str, Any]) -> MaskRecord:
        return MaskRecord(
            name=doc["name"],
            masked_field_names=list(doc.get("maskedFieldNames", [])),
            original=doc.get("original"),
            param=doc.get("param"),
            serialized_mask=doc["serializedMask"],
            created_at=doc["createdAt"],
            updated_at=doc.get("updatedAt", doc["createdAt"]),
        )


__all__ = ["MongoMaskStore"]
