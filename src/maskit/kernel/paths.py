"""Kernel paths – dotted, index-aware access into nested dict/list trees.

Path syntax::

    "name"                 -> obj["name"]
    "contact.email"        -> obj["contact"]["email"]
    "addresses.0.street"   -> obj["addresses"][0]["street"]

All-digit segments address list indices; on a mapping they address the key
``"0"`` (or ``0`` when no string key exists).  :func:`get` never raises for a
path that simply is not there: it returns :data:`MISSING`.
"""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from functools import lru_cache
from typing import Any, Union

from maskit.kernel.errors import InvalidPathError

Segment = Union[str, int]


class _Missing:
    """Sentinel for a path that does not resolve."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@lru_cache(maxsize=1024)
def parse(path: str) -> tuple[Segment, ...]:
    """Split *path* into segments, converting all-digit segments to ``int``."""
    if not isinstance(path, str) or not path:
        raise InvalidPathError(str(path), "path must be a non-empty string")
    segments: list[Segment] = []
    for raw in path.split("."):
        if not raw:
            raise InvalidPathError(path, "empty path segment")
        segments.append(int(raw) if raw.isascii() and raw.isdigit() else raw)
    return tuple(segments)


def _is_sequence(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def _step(node: Any, segment: Segment) -> Any:
    if isinstance(node, Mapping):
        if isinstance(segment, int):
            if str(segment) in node:
                return node[str(segment)]
            return node.get(segment, MISSING)
        return node.get(segment, MISSING)
    if _is_sequence(node) and isinstance(segment, int):
        return node[segment] if segment < len(node) else MISSING
    return MISSING


def get(obj: Any, path: str | Sequence[Segment]) -> Any:
    """Return the value at *path* or :data:`MISSING`."""
    segments = parse(path) if isinstance(path, str) else path
    node = obj
    for segment in segments:
        node = _step(node, segment)
        if node is MISSING:
            return MISSING
    return node


def _mapping_key(node: Mapping[Any, Any], segment: Segment) -> Any:
    if isinstance(segment, int) and str(segment) not in node and segment in node:
        return segment
    return str(segment) if isinstance(segment, int) else segment


def _assign(node: Any, segment: Segment, value: Any, path: str) -> Any:
    """Write *value* under *segment* and return the container holding it.

    Tuples cannot be written in place, so a rebuilt tuple is returned and the
    caller stores it in the parent.
    """
    if isinstance(node, MutableMapping):
        node[_mapping_key(node, segment)] = value
        return node
    if isinstance(node, MutableSequence) and isinstance(segment, int):
        while len(node) <= segment:
            node.append(None)
        node[segment] = value
        return node
    if isinstance(node, tuple) and isinstance(segment, int):
        items = list(node)
        items.extend([None] * (segment + 1 - len(items)))
        items[segment] = value
        return node._make(items) if hasattr(node, "_make") else tuple(items)
    raise InvalidPathError(path, f"cannot assign segment {segment!r} on {type(node).__name__}")


def _put(node: Any, segments: tuple[Segment, ...], value: Any, path: str) -> Any:
    segment, rest = segments[0], segments[1:]
    if rest:
        child = _step(node, segment)
        if child is MISSING or child is None:
            child = [] if isinstance(rest[0], int) else {}
            return _assign(node, segment, _put(child, rest, value, path), path)
        updated = _put(child, rest, value, path)
        if updated is child:
            return node
        value = updated
    return _assign(node, segment, value, path)


def set(obj: Any, path: str | Sequence[Segment], value: Any) -> Any:  # noqa: A001
    """Write *value* at *path*, creating missing containers.

    Mutable containers are updated in place.  A missing intermediate becomes a
    ``list`` when the next segment is an index and a ``dict`` otherwise.
    Tuples along the path are rebuilt, so callers must keep the return value:
    it is *obj* itself unless *obj* is a tuple.
    """
    segments = parse(path) if isinstance(path, str) else tuple(path)
    label = path if isinstance(path, str) else ".".join(str(s) for s in segments)
    return _put(obj, segments, value, label)


__all__ = ["MISSING", "Segment", "get", "parse", "set"]
