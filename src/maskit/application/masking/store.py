"""Persistence port for named compiled masks.

The engine itself holds no I/O handle: callers construct a store (see
:mod:`maskit.adapters.mongodb`) and pass it to :func:`save_compiled_mask`.
"""
from __future__ import annotations

import abc
import dataclasses
import json
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from maskit.application.masking.compiler import CompiledMask
from maskit.application.masking.serialization import MaskSerializer
from maskit.kernel.time import Clock, SystemClock
from maskit.observability.logging import get_logger

__all__ = ["CompiledMaskStore", "MaskRecord", "masked_field_names", "save_compiled_mask"]

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class MaskRecord:
    """A named compiled mask together with the sample it was saved with."""

    name: str
    masked_field_names: list[str]
    original: Any
    param: Any
    serialized_mask: str
    created_at: datetime
    updated_at: datetime


class CompiledMaskStore(abc.ABC):
    """Port: upsert-by-name storage of :class:`MaskRecord` documents."""

    @abc.abstractmethod
    async def save(self, record: MaskRecord) -> None:
        """Insert or replace the record stored under ``record.name``.

        Implementations keep the first ``created_at`` on replacement.
        """

    @abc.abstractmethod
    async def get(self, name: str) -> MaskRecord | None: ...


def _fingerprint(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=str)


def masked_field_names(original: Any, masked: Any) -> list[str]:
    """Top-level keys of *original* whose value differs in *masked*."""
    if not isinstance(original, Mapping) or not isinstance(masked, Mapping):
        return []
    return [
        key
        for key, value in original.items()
        if _fingerprint(value) != _fingerprint(masked.get(key))
    ]


async def save_compiled_mask(
    store: CompiledMaskStore,
    serializer: MaskSerializer,
    name: str,
    compiled: CompiledMask,
    original: Any,
    param: Any = None,
    clock: Clock | None = None,
) -> MaskRecord:
    """Serialise *compiled*, record which fields it masks and upsert it."""
    serialized = serializer.serialize(compiled)
    masked = compiled(original, param)
    now = (clock or SystemClock()).now()
    record = MaskRecord(
        name=name,
        masked_field_names=masked_field_names(original, masked),
        original=original,
        param=param,
        serialized_mask=serialized,
        created_at=now,
        updated_at=now,
    )
    await store.save(record)
    _log.info("mask_saved", name=name, masked_fields=record.masked_field_names)
    return record
