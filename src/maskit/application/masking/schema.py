"""Optional, best-effort validation of rule paths against a schema descriptor.

A schema descriptor describes the shape of the objects a compiled mask will
see.  Accepted forms:

* a primitive type (``str``, ``int``, ``datetime`` …) or a tuple of them;
* a ``dict`` mapping field names to nested descriptors;
* a one-element ``list`` ``[descriptor]`` for homogeneous arrays;
* a dataclass or ``TypedDict`` class (fields read with ``get_type_hints``);
* ``list[X]`` / ``dict[str, X]`` / ``Optional[X]`` typing generics;
* ``typing.Any`` / ``object`` – anything below this point is accepted.
"""
from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping, Sequence
from typing import Any

from maskit.application.masking.rules import Rule
from maskit.kernel import paths
from maskit.kernel.errors import InvalidMaskSpecError, InvalidPathError

__all__ = ["validate_rules"]

_OPEN = object()


def _normalise(schema: Any) -> Any:
    """Reduce typing constructs to dict / list / primitive / _OPEN."""
    if schema is Any or schema is object:
        return _OPEN
    origin = typing.get_origin(schema)
    if origin in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(schema) if arg is not type(None)]
        return _normalise(members[0]) if len(members) == 1 else _OPEN
    if origin in (list, tuple, Sequence):
        args = typing.get_args(schema)
        return [args[0] if args else Any]
    if origin in (dict, Mapping):
        args = typing.get_args(schema)
        return {"*": args[1] if len(args) == 2 else Any}
    if dataclasses.is_dataclass(schema) and isinstance(schema, type):
        return typing.get_type_hints(schema)
    if isinstance(schema, type) and typing.is_typeddict(schema):
        return typing.get_type_hints(schema)
    return schema


def _descend(schema: Any, segment: paths.Segment, path: str) -> Any:
    if isinstance(schema, dict):
        key = str(segment)
        if key in schema:
            return schema[key]
        if "*" in schema:
            return schema["*"]
        raise InvalidPathError(path, f"field '{key}' is not declared in the schema")
    if isinstance(schema, list):
        if not isinstance(segment, int):
            raise InvalidPathError(path, f"segment '{segment}' indexes an array")
        return schema[0] if schema else Any
    raise InvalidPathError(path, f"segment '{segment}' descends into a primitive")


def _resolve(schema: Any, rule: Rule) -> Any:
    node = _normalise(schema)
    for segment in paths.parse(rule.key):
        if node is _OPEN:
            return _OPEN
        node = _normalise(_descend(node, segment, rule.key))
    return node


def validate_rules(rules: Sequence[Rule], schema: Any) -> None:
    """Fail fast on the first rule whose key or mask does not fit *schema*.

    Raises:
        InvalidPathError: the key does not exist in the schema.
        InvalidMaskSpecError: a non-function mask targets a composite field.
    """
    for rule in rules:
        target = _resolve(schema, rule)
        if target is _OPEN or rule.is_function:
            continue
        if isinstance(target, (dict, list)):
            raise InvalidMaskSpecError(
                rule.key, "schema declares a composite value; use a function mask"
            )
