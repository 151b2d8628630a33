"""Infrastructure errors – codec and storage failures."""

from __future__ import annotations

from typing import Any

from maskit.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O or encoding failure that is not a rule-set problem."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A compiled mask could not be encoded or decoded."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class PersistenceError(InfrastructureError):
    """The compiled-mask store rejected a read or write."""

    default_code = "persistence_error"

    def __init__(self, operation: str, name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Mask store {operation} failed for '{name}'",
            detail={"operation": operation, "name": name},
            **kwargs,
        )
        self.operation = operation
        self.name = name


__all__ = ["InfrastructureError", "PersistenceError", "SerializationError"]
