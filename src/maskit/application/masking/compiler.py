"""MaskCompiler – bind a rule set once, apply it many times."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from maskit.application.masking.classifier import canonicalize
from maskit.application.masking.config import MaskConfig
from maskit.application.masking.engine import MaskEngine, ResolvedRule
from maskit.application.masking.rules import Rule
from maskit.application.masking.schema import validate_rules
from maskit.observability.logging import get_logger

__all__ = ["CompiledMask", "MaskCompiler"]

_log = get_logger(__name__)


class CompiledMask:
    """Reusable transform ``compiled(obj, param=None) -> masked copy``.

    Built by :meth:`MaskCompiler.compile`.  With ``rules`` it behaves exactly
    like :meth:`MaskEngine.apply` for that rule set; without rules (the
    *mask-everything* mode) every scalar leaf is replaced by as many mask
    characters as its canonical string has, keeping the shape of the input.
    """

    __slots__ = ("_engine", "_resolved")

    def __init__(self, engine: MaskEngine, resolved: tuple[ResolvedRule, ...] | None) -> None:
        self._engine = engine
        self._resolved = resolved

    @property
    def config(self) -> MaskConfig:
        return self._engine.config

    @property
    def mask_all(self) -> bool:
        return self._resolved is None

    @property
    def rules(self) -> tuple[Rule, ...]:
        if self._resolved is None:
            return ()
        return tuple(item.rule for item in self._resolved)

    def __call__(self, obj: Any, param: Any = None) -> Any:
        if self._resolved is None:
            return self._mask_recursive(obj)
        return self._engine.run(obj, self._resolved, param)

    def _mask_recursive(self, node: Any) -> Any:
        if node is None:
            return None
        if isinstance(node, Mapping):
            return {key: self._mask_recursive(value) for key, value in node.items()}
        if isinstance(node, tuple):
            return tuple(self._mask_recursive(item) for item in node)
        if isinstance(node, list):
            return [self._mask_recursive(item) for item in node]
        # Leaves outside the primitive set (UUID, Enum, ...) mask by str().
        return self.config.mask_char * len(canonicalize(node))

    def __repr__(self) -> str:
        if self.mask_all:
            return "CompiledMask(mask_all=True)"
        return f"CompiledMask(keys={[rule.key for rule in self.rules]!r})"


class MaskCompiler:
    def __init__(self, engine: MaskEngine) -> None:
        self._engine = engine

    def compile(
        self,
        rules: Iterable[Rule | Mapping[str, Any]] | None = None,
        schema: Any = None,
    ) -> CompiledMask:
        """Validate and bind *rules*; ``None`` selects mask-everything mode.

        Key uniqueness, helper and registry references and, when *schema* is
        given, path validity are all checked here, never per call.
        """
        if rules is None:
            _log.debug("mask_compiled", mode="all")
            return CompiledMask(self._engine, None)

        resolved = self._engine.resolve(rules)
        if schema is not None:
            validate_rules([item.rule for item in resolved], schema)
        _log.debug("mask_compiled", mode="rules", keys=[item.key for item in resolved])
        return CompiledMask(self._engine, resolved)
