"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from maskit.application.masking.compiler import CompiledMask

# Keys structlog itself adds or formats later; a mask never rewrites them.
_RESERVED_KEYS = frozenset({"event", "level", "logger", "timestamp", "exc_info", "stack_info"})


class MaskingProcessor:
    """structlog processor that runs every event dict through a compiled mask.

    Usage::

        compiled = Maskit().compile([Rule("password", 6)])
        structlog.configure(processors=[MaskingProcessor(compiled), ...])

    Reserved structlog keys (``event``, ``level``, ``logger``, ``timestamp``,
    ``exc_info``, ``stack_info``) are restored after masking so that a
    mask-everything compiled mask still yields a readable log line and the
    exception formatter further down the chain still sees the exception.
    """

    def __init__(self, mask: CompiledMask, param: Any = None) -> None:
        self._mask = mask
        self._param = param

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        masked = self._mask(event_dict, self._param)
        for key in _RESERVED_KEYS & event_dict.keys():
            masked[key] = event_dict[key]
        return masked


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["MaskingProcessor", "get_logger"]
