"""Kernel – framework-agnostic building blocks (errors, paths, time)."""

from maskit.kernel.errors import (
    BaseError,
    DuplicateRuleKeyError,
    InfrastructureError,
    InvalidMaskSpecError,
    InvalidPathError,
    MaskingError,
    PersistenceError,
    SerializationError,
    UnknownFunctionError,
)

__all__ = [
    "BaseError",
    "DuplicateRuleKeyError",
    "InfrastructureError",
    "InvalidMaskSpecError",
    "InvalidPathError",
    "MaskingError",
    "PersistenceError",
    "SerializationError",
    "UnknownFunctionError",
]
