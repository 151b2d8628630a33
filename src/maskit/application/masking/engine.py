"""MaskEngine – resolves rule sets and applies them to a snapshot of the input.

``apply`` is all-or-nothing: the input is never touched, every read goes to
the original object and every write to a deep copy, and any error aborts the
call before the copy is returned.
"""
from __future__ import annotations

import copy
import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Callable

from maskit.application.masking.classifier import ValueKind, classify
from maskit.application.masking.config import MaskConfig
from maskit.application.masking.registry import FunctionRegistry
from maskit.application.masking.rules import (
    CustomMask,
    CustomPredicate,
    FixedLength,
    HelperMask,
    LiteralReplace,
    ParamIn,
    RegisteredMask,
    RegisteredPredicate,
    Rule,
    ensure_unique_keys,
    positional_adapter,
)
from maskit.kernel import paths
from maskit.kernel.errors import InvalidMaskSpecError
from maskit.observability.logging import get_logger

__all__ = ["MaskEngine", "ResolvedRule"]

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ResolvedRule:
    """A rule with its path parsed and every reference bound to a callable."""

    rule: Rule
    segments: tuple[paths.Segment, ...]
    transform: Callable[[Any, Any], Any]
    predicate: Callable[[Any], bool] | None
    accepts_composite: bool

    @property
    def key(self) -> str:
        return self.rule.key


class MaskEngine:
    """Applies rule sets with a fixed :class:`MaskConfig` and registry."""

    def __init__(
        self,
        config: MaskConfig | None = None,
        registry: FunctionRegistry | None = None,
    ) -> None:
        self.config = config or MaskConfig()
        self.registry = registry if registry is not None else FunctionRegistry()

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, rules: Iterable[Rule | Mapping[str, Any]] | None) -> tuple[ResolvedRule, ...]:
        """Validate key uniqueness and bind every rule to its behaviour."""
        return tuple(self._resolve_rule(rule) for rule in ensure_unique_keys(rules))

    def _resolve_rule(self, rule: Rule) -> ResolvedRule:
        return ResolvedRule(
            rule=rule,
            segments=paths.parse(rule.key),
            transform=self._bind_mask(rule),
            predicate=self._bind_predicate(rule),
            accepts_composite=rule.is_function,
        )

    def _bind_mask(self, rule: Rule) -> Callable[[Any, Any], Any]:
        config = self.config
        spec = rule.mask
        if isinstance(spec, FixedLength):
            masked = config.mask_char * spec.length
            return lambda value, param: masked
        if isinstance(spec, LiteralReplace):
            text = spec.text
            return lambda value, param: text
        if isinstance(spec, HelperMask):
            helper = config.helper(spec.name)
            return lambda value, param: helper(value, config)
        if isinstance(spec, RegisteredMask):
            fn = positional_adapter(self.registry.get(spec.function_id), 3)
        elif isinstance(spec, CustomMask):
            fn = positional_adapter(spec.fn, 3)
        else:
            raise InvalidMaskSpecError(rule.key, f"unsupported mask spec {type(spec).__name__}")
        return lambda value, param: fn(value, config, param)

    def _bind_predicate(self, rule: Rule) -> Callable[[Any], bool] | None:
        spec = rule.ignore
        if spec is None:
            return None
        if isinstance(spec, ParamIn):
            return spec
        if isinstance(spec, RegisteredPredicate):
            return self.registry.get(spec.function_id)
        if isinstance(spec, CustomPredicate):
            return spec.fn
        raise InvalidMaskSpecError(rule.key, f"unsupported ignore predicate {type(spec).__name__}")

    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------

    def run(self, obj: Any, resolved: Iterable[ResolvedRule], param: Any = None) -> Any:
        """Apply already-resolved rules to a deep copy of *obj*.

        Predicates are only consulted when *param* is not ``None``.  Missing
        paths are left alone.  A ``None`` value reaches function masks only;
        the fixed-length, literal and helper masks leave it as ``None``.
        """
        result = copy.deepcopy(obj)
        for item in resolved:
            if item.predicate is not None and param is not None and item.predicate(param):
                _log.debug("mask_rule_skipped", key=item.key, reason="ignored")
                continue

            value = paths.get(obj, item.segments)
            if value is paths.MISSING:
                _log.debug("mask_rule_skipped", key=item.key, reason="missing")
                continue
            if value is None and not item.accepts_composite:
                _log.debug("mask_rule_skipped", key=item.key, reason="null")
                continue

            if not item.accepts_composite and classify(value) is ValueKind.COMPOSITE:
                raise InvalidMaskSpecError(item.key)

            result = paths.set(result, item.segments, item.transform(value, param))
        return result

    def apply(
        self,
        obj: Any,
        rules: Iterable[Rule | Mapping[str, Any]] | None = None,
        param: Any = None,
    ) -> Any:
        """Return a masked copy of *obj*; ``rules=None`` returns a plain copy.

        Raises:
            DuplicateRuleKeyError: two rules share a key.
            InvalidMaskSpecError: a non-function mask meets a composite value.
            UnknownFunctionError: a helper or registry reference is unknown.
        """
        return self.run(obj, self.resolve(rules), param)
