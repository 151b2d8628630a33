"""Maskit – one object bundling engine, compiler, serializer and persistence."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from maskit.application.masking.compiler import CompiledMask, MaskCompiler
from maskit.application.masking.config import MaskConfig
from maskit.application.masking.engine import MaskEngine
from maskit.application.masking.registry import FunctionRegistry
from maskit.application.masking.rules import Rule
from maskit.application.masking.serialization import MaskSerializer
from maskit.application.masking.store import CompiledMaskStore, MaskRecord, save_compiled_mask
from maskit.config.settings import MaskitSettings
from maskit.kernel.time import Clock, SystemClock
from maskit.observability.logging import get_logger

__all__ = ["Maskit"]

RuleInput = Iterable[Rule | Mapping[str, Any]]


class Maskit:
    """Entry point for masking nested data.

    Usage::

        maskit = Maskit(MaskConfig(mask_char="#"))
        maskit.apply({"name": "John Doe"}, values=[Rule("name", 4)])
        # {'name': '####'}

        compiled = maskit.compile([
            Rule("email", HelperMask("email"), ParamIn("role", ["admin"])),
        ])
        compiled({"email": "john@example.com"}, {"role": "user"})
        # {'email': '****@example.com'}

    The instance is immutable after construction and safe to share.
    """

    def __init__(
        self,
        config: MaskConfig | None = None,
        registry: FunctionRegistry | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.registry = registry if registry is not None else FunctionRegistry()
        self._engine = MaskEngine(config, self.registry)
        self._compiler = MaskCompiler(self._engine)
        self._serializer = MaskSerializer(self._compiler, self.registry)
        self._clock = clock or SystemClock()
        self._logger = get_logger("maskit")

    @classmethod
    def from_settings(
        cls,
        settings: MaskitSettings,
        registry: FunctionRegistry | None = None,
    ) -> Maskit:
        return cls(MaskConfig.from_settings(settings), registry)

    @property
    def config(self) -> MaskConfig:
        return self._engine.config

    def apply(self, obj: Any, param: Any = None, values: RuleInput | None = None) -> Any:
        """Mask a copy of *obj* with *values*; no rules means no masking."""
        return self._engine.apply(obj, values, param)

    def compile(self, values: RuleInput | None = None, schema: Any = None) -> CompiledMask:
        """Compile *values*, or everything-masking mode when omitted."""
        return self._compiler.compile(values, schema)

    def serialize(self, compiled: CompiledMask) -> str:
        return self._serializer.serialize(compiled)

    def deserialize(self, text: str | bytes) -> CompiledMask:
        return self._serializer.deserialize(text)

    def log(self, obj: Any) -> None:
        """Emit *obj* as a structured ``masked_object`` event."""
        self._logger.info("masked_object", payload=obj)

    async def save(
        self,
        name: str,
        compiled: CompiledMask,
        original: Any,
        param: Any,
        store: CompiledMaskStore,
    ) -> MaskRecord:
        """Upsert *compiled* under *name* in *store*."""
        return await save_compiled_mask(
            store, self._serializer, name, compiled, original, param, clock=self._clock
        )
