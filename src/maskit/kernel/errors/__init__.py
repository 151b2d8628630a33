"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── MaskingError            (masking.py)
    │   ├── DuplicateRuleKeyError
    │   ├── InvalidMaskSpecError
    │   ├── InvalidPathError
    │   └── UnknownFunctionError
    ├── InfrastructureError     (infrastructure.py)
    │   ├── SerializationError
    │   └── PersistenceError
    └── ConfigError             (maskit.config.errors)
"""

from maskit.kernel.errors.base import BaseError
from maskit.kernel.errors.infrastructure import (
    InfrastructureError,
    PersistenceError,
    SerializationError,
)
from maskit.kernel.errors.masking import (
    DuplicateRuleKeyError,
    InvalidMaskSpecError,
    InvalidPathError,
    MaskingError,
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
