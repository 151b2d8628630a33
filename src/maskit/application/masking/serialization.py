"""MaskSerializer – portable JSON form of a compiled mask.

The document only carries variant tags, their parameters and registry names::

    {
      "format": "maskit.compiled-mask",
      "version": 1,
      "mode": "rules",
      "rules": [
        {"key": "name", "mask": {"type": "fixed_length", "length": 4}, "ignore": null},
        {"key": "email", "mask": {"type": "registered", "function_id": "local_part"},
         "ignore": {"type": "param_in", "key": "role", "values": ["admin"]}}
      ]
    }

Deserialising never evaluates code: behaviour is looked up by name in the
:class:`FunctionRegistry` of the receiving side.
"""
from __future__ import annotations

import json
from typing import Any

from maskit.application.masking.compiler import CompiledMask, MaskCompiler
from maskit.application.masking.registry import FunctionRegistry
from maskit.application.masking.rules import (
    CustomMask,
    CustomPredicate,
    FixedLength,
    HelperMask,
    IgnoreSpec,
    LiteralReplace,
    MaskSpec,
    ParamIn,
    RegisteredMask,
    RegisteredPredicate,
    Rule,
)
from maskit.kernel.errors import MaskingError, SerializationError

__all__ = ["FORMAT", "VERSION", "MaskSerializer"]

FORMAT = "maskit.compiled-mask"
VERSION = 1


class MaskSerializer:
    """Encode / decode :class:`CompiledMask` objects.

    Args:
        compiler: compiler used to rebuild masks on :meth:`deserialize`.
        registry: used both to name custom callables on the way out and to
            resolve registered names on the way in.
    """

    def __init__(self, compiler: MaskCompiler, registry: FunctionRegistry) -> None:
        self._compiler = compiler
        self._registry = registry

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def serialize(self, compiled: CompiledMask) -> str:
        document: dict[str, Any] = {"format": FORMAT, "version": VERSION}
        if compiled.mask_all:
            document["mode"] = "all"
            document["rules"] = []
        else:
            document["mode"] = "rules"
            document["rules"] = [self._encode_rule(rule) for rule in compiled.rules]
        try:
            return json.dumps(document, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Compiled mask is not JSON-serialisable: {exc}",
                payload_type="CompiledMask",
                cause=exc,
            ) from exc

    def _encode_rule(self, rule: Rule) -> dict[str, Any]:
        return {
            "key": rule.key,
            "mask": self._encode_mask(rule),
            "ignore": self._encode_ignore(rule),
        }

    def _registered_name(self, fn: Any, key: str, kind: str) -> str:
        name = self._registry.name_of(fn)
        if name is None:
            raise SerializationError(
                f"Custom {kind} for key '{key}' is not registered; "
                "register it in the FunctionRegistry to serialise it",
                payload_type=kind,
                detail={"key": key},
            )
        return name

    def _encode_mask(self, rule: Rule) -> dict[str, Any]:
        spec: MaskSpec = rule.mask
        if isinstance(spec, FixedLength):
            return {"type": "fixed_length", "length": spec.length}
        if isinstance(spec, LiteralReplace):
            return {"type": "literal", "text": spec.text}
        if isinstance(spec, HelperMask):
            return {"type": "helper", "name": spec.name}
        if isinstance(spec, RegisteredMask):
            return {"type": "registered", "function_id": spec.function_id}
        if isinstance(spec, CustomMask):
            return {"type": "registered", "function_id": self._registered_name(spec.fn, rule.key, "mask")}
        raise SerializationError(f"Unsupported mask spec {type(spec).__name__}", payload_type="mask")

    def _encode_ignore(self, rule: Rule) -> dict[str, Any] | None:
        spec: IgnoreSpec | None = rule.ignore
        if spec is None:
            return None
        if isinstance(spec, ParamIn):
            return {"type": "param_in", "key": spec.key, "values": list(spec.values)}
        if isinstance(spec, RegisteredPredicate):
            return {"type": "registered", "function_id": spec.function_id}
        if isinstance(spec, CustomPredicate):
            return {
                "type": "registered",
                "function_id": self._registered_name(spec.fn, rule.key, "ignore predicate"),
            }
        raise SerializationError(f"Unsupported ignore predicate {type(spec).__name__}", payload_type="ignore")

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def deserialize(self, text: str | bytes) -> CompiledMask:
        """Rebuild and compile the mask described by *text*.

        Raises:
            SerializationError: malformed document or unknown variant tag.
            UnknownFunctionError: a referenced helper or function is not
                available on this side.
        """
        try:
            document = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise SerializationError("Serialized mask is not valid JSON", payload_type="CompiledMask", cause=exc) from exc

        if not isinstance(document, dict) or document.get("format") != FORMAT:
            raise SerializationError("Not a serialized compiled mask", payload_type="CompiledMask")
        if document.get("version") != VERSION:
            raise SerializationError(
                f"Unsupported serialized mask version {document.get('version')!r}",
                payload_type="CompiledMask",
            )

        mode = document.get("mode")
        if mode == "all":
            return self._compiler.compile(None)
        if mode != "rules":
            raise SerializationError(f"Unknown mask mode {mode!r}", payload_type="CompiledMask")

        try:
            rules = [self._decode_rule(item) for item in document.get("rules", [])]
        except MaskingError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Malformed rule in serialized mask: {exc}", payload_type="Rule", cause=exc) from exc
        return self._compiler.compile(rules)

    def _decode_rule(self, item: dict[str, Any]) -> Rule:
        return Rule(
            key=item["key"],
            mask=self._decode_mask(item["mask"]),
            ignore=self._decode_ignore(item.get("ignore")),
        )

    def _decode_mask(self, data: dict[str, Any]) -> MaskSpec:
        kind = data["type"]
        if kind == "fixed_length":
            return FixedLength(data["length"])
        if kind == "literal":
            return LiteralReplace(data["text"])
        if kind == "helper":
            return HelperMask(data["name"])
        if kind == "registered":
            return RegisteredMask(data["function_id"])
        raise SerializationError(f"Unknown mask type {kind!r}", payload_type="mask")

    def _decode_ignore(self, data: dict[str, Any] | None) -> IgnoreSpec | None:
        if data is None:
            return None
        kind = data["type"]
        if kind == "param_in":
            return ParamIn(data["key"], tuple(data["values"]))
        if kind == "registered":
            return RegisteredPredicate(data["function_id"])
        raise SerializationError(f"Unknown ignore type {kind!r}", payload_type="ignore")
