"""Rules – target paths, mask specs and ignore predicates.

Mask specs and ignore predicates form closed sets of frozen dataclasses so a
rule set can be validated, compiled and serialised without inspecting code.
:class:`Rule` also accepts the shorthand forms ``int`` (fixed length),
``str`` (literal) and any callable (custom mask / predicate).
"""
from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Union

from maskit.kernel import paths
from maskit.kernel.errors import DuplicateRuleKeyError

__all__ = [
    "CustomMask",
    "CustomPredicate",
    "FixedLength",
    "HelperMask",
    "IgnoreSpec",
    "LiteralReplace",
    "MaskSpec",
    "ParamIn",
    "RegisteredMask",
    "RegisteredPredicate",
    "Rule",
    "as_ignore_spec",
    "as_mask_spec",
    "as_rule",
    "ensure_unique_keys",
    "positional_adapter",
]


# ---------------------------------------------------------------------------
# Mask specs
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class FixedLength:
    """Replace a primitive with ``length`` mask characters."""

    length: int

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise TypeError(f"FixedLength expects an int, got {type(self.length).__name__}")
        if self.length < 0:
            raise ValueError("FixedLength must not be negative")


@dataclasses.dataclass(frozen=True)
class LiteralReplace:
    """Replace a primitive with ``text`` verbatim."""

    text: str


@dataclasses.dataclass(frozen=True)
class HelperMask:
    """Apply ``config.helpers[name]`` to a primitive."""

    name: str


@dataclasses.dataclass(frozen=True)
class RegisteredMask:
    """Call the registry function ``function_id`` as ``fn(value, config, param)``."""

    function_id: str


@dataclasses.dataclass(frozen=True)
class CustomMask:
    """In-process callable ``fn(value, config, param)``.

    Serialisable only when ``fn`` is registered in the serialiser's registry.
    """

    fn: Callable[..., Any]


MaskSpec = Union[FixedLength, LiteralReplace, HelperMask, RegisteredMask, CustomMask]

FUNCTION_SPECS: tuple[type, ...] = (RegisteredMask, CustomMask)


# ---------------------------------------------------------------------------
# Ignore predicates
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class ParamIn:
    """Skip the rule when ``param[key]`` is one of ``values``."""

    key: str
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if isinstance(self.values, (str, bytes)) or not isinstance(self.values, Iterable):
            object.__setattr__(self, "values", (self.values,))
        else:
            object.__setattr__(self, "values", tuple(self.values))

    def __call__(self, param: Any) -> bool:
        if not isinstance(param, Mapping) or self.key not in param:
            return False
        return param[self.key] in self.values


@dataclasses.dataclass(frozen=True)
class RegisteredPredicate:
    function_id: str


@dataclasses.dataclass(frozen=True)
class CustomPredicate:
    fn: Callable[[Any], bool]


IgnoreSpec = Union[ParamIn, RegisteredPredicate, CustomPredicate]


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------

_MASK_SPECS = (FixedLength, LiteralReplace, HelperMask, RegisteredMask, CustomMask)
_IGNORE_SPECS = (ParamIn, RegisteredPredicate, CustomPredicate)


def as_mask_spec(mask: Any) -> MaskSpec:
    if isinstance(mask, _MASK_SPECS):
        return mask
    if isinstance(mask, bool):
        raise TypeError("A bool is not a valid mask")
    if isinstance(mask, int):
        return FixedLength(mask)
    if isinstance(mask, str):
        return LiteralReplace(mask)
    if callable(mask):
        return CustomMask(mask)
    raise TypeError(f"Unsupported mask of type {type(mask).__name__}")


def as_ignore_spec(ignore: Any) -> IgnoreSpec | None:
    if ignore is None or isinstance(ignore, _IGNORE_SPECS):
        return ignore
    if callable(ignore):
        return CustomPredicate(ignore)
    raise TypeError(f"Unsupported ignore predicate of type {type(ignore).__name__}")


@dataclasses.dataclass(frozen=True)
class Rule:
    """Mask the value at ``key`` with ``mask`` unless ``ignore(param)`` holds.

    Example::

        Rule("contact.email", HelperMask("email"), ParamIn("role", ["admin"]))
    """

    key: str
    mask: MaskSpec
    ignore: IgnoreSpec | None = None

    def __post_init__(self) -> None:
        paths.parse(self.key)
        object.__setattr__(self, "mask", as_mask_spec(self.mask))
        object.__setattr__(self, "ignore", as_ignore_spec(self.ignore))

    @property
    def is_function(self) -> bool:
        return isinstance(self.mask, FUNCTION_SPECS)


def as_rule(item: Rule | Mapping[str, Any]) -> Rule:
    """Accept a :class:`Rule` or a ``{"key", "mask", "ignore"}`` mapping."""
    if isinstance(item, Rule):
        return item
    if isinstance(item, Mapping):
        return Rule(key=item["key"], mask=item["mask"], ignore=item.get("ignore"))
    raise TypeError(f"Cannot build a Rule from {type(item).__name__}")


def ensure_unique_keys(rules: Iterable[Rule | Mapping[str, Any]] | None) -> tuple[Rule, ...]:
    """Coerce *rules* to a tuple, failing on the first repeated key."""
    result: list[Rule] = []
    seen: set[str] = set()
    for item in rules or ():
        rule = as_rule(item)
        if rule.key in seen:
            raise DuplicateRuleKeyError(rule.key)
        seen.add(rule.key)
        result.append(rule)
    return tuple(result)


def positional_adapter(fn: Callable[..., Any], max_args: int) -> Callable[..., Any]:
    """Wrap *fn* so it may declare fewer than *max_args* positional parameters.

    ``lambda value: ...`` and ``lambda value, config, param: ...`` are both
    valid custom masks; the wrapper passes the longest prefix *fn* accepts.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return fn

    accepted = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return fn
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            accepted += 1
    if accepted >= max_args:
        return fn

    def adapted(*args: Any) -> Any:
        return fn(*args[:accepted])

    return adapted
