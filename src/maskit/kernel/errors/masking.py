"""Masking errors – invalid rule sets and unresolvable references.

All of these abort the ``apply`` / ``compile`` call that raised them; the
caller never receives a partially masked object.
"""

from __future__ import annotations

from typing import Any

from maskit.kernel.errors.base import BaseError


class MaskingError(BaseError):
    """A rule set cannot be applied as declared."""

    default_code = "masking_error"


class DuplicateRuleKeyError(MaskingError):
    """Two rules in one rule set target the same key."""

    default_code = "duplicate_rule_key"

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            f"Duplicate rule key '{key}' in rule set",
            detail={"key": key},
            **kwargs,
        )
        self.key = key


class InvalidMaskSpecError(MaskingError):
    """A mask spec cannot be applied to the value found at its key."""

    default_code = "invalid_mask_spec"

    def __init__(
        self,
        key: str,
        reason: str = "only function masks may be applied to non-primitive values",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Invalid mask for key '{key}': {reason}",
            detail={"key": key, "reason": reason},
            **kwargs,
        )
        self.key = key
        self.reason = reason


class InvalidPathError(MaskingError):
    """A path is malformed or does not exist in a schema descriptor."""

    default_code = "invalid_path"

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid path '{path}': {reason}",
            detail={"path": path, "reason": reason},
            **kwargs,
        )
        self.path = path
        self.reason = reason


class UnknownFunctionError(MaskingError):
    """A helper or registered function reference cannot be resolved."""

    default_code = "unknown_function"

    def __init__(self, kind: str, name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown {kind} '{name}'",
            detail={"kind": kind, "name": name},
            **kwargs,
        )
        self.kind = kind
        self.name = name


__all__ = [
    "DuplicateRuleKeyError",
    "InvalidMaskSpecError",
    "InvalidPathError",
    "MaskingError",
    "UnknownFunctionError",
]
