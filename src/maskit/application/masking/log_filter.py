from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from maskit.application.masking.compiler import CompiledMask

__all__ = ["MaskingLogFilter"]


class MaskingLogFilter(logging.Filter):
    """Applies a compiled mask to dict log messages and dict args before emission."""

    def __init__(self, mask: CompiledMask, param: Any = None, name: str = "") -> None:
        super().__init__(name)
        self._mask = mask
        self._param = param

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if isinstance(record.msg, Mapping):
            record.msg = self._mask(record.msg, self._param)
        if isinstance(record.args, Mapping):
            record.args = self._mask(record.args, self._param)  # type: ignore[assignment]
        elif isinstance(record.args, tuple):
            record.args = tuple(
                self._mask(arg, self._param) if isinstance(arg, Mapping) else arg
                for arg in record.args
            )
        return True
