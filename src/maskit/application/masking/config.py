"""MaskConfig – immutable configuration shared by every rule evaluation."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from maskit.application.masking.helpers import DEFAULT_HELPERS, HelperFn
from maskit.config.errors import InvalidSettingValueError
from maskit.kernel.errors import UnknownFunctionError

if TYPE_CHECKING:
    from maskit.config.settings import MaskitSettings


@dataclasses.dataclass(frozen=True)
class MaskConfig:
    """Masking character, helper segment separator and named helpers.

    ``helpers`` is frozen into a read-only mapping on construction; pass a
    mapping that includes :data:`DEFAULT_HELPERS` to extend rather than
    replace the built-ins.
    """

    mask_char: str = "*"
    separator: str = " "
    helpers: Mapping[str, HelperFn] = dataclasses.field(default_factory=lambda: DEFAULT_HELPERS)

    def __post_init__(self) -> None:
        if not isinstance(self.mask_char, str) or len(self.mask_char) != 1:
            raise InvalidSettingValueError(
                "mask_char", self.mask_char, "must be exactly one character"
            )
        if not isinstance(self.separator, str) or not self.separator:
            raise InvalidSettingValueError("separator", self.separator, "must not be empty")
        object.__setattr__(self, "helpers", MappingProxyType(dict(self.helpers)))

    def helper(self, name: str) -> HelperFn:
        try:
            return self.helpers[name]
        except KeyError:
            raise UnknownFunctionError("helper", name) from None

    @classmethod
    def from_settings(
        cls,
        settings: MaskitSettings,
        helpers: Mapping[str, HelperFn] = DEFAULT_HELPERS,
    ) -> MaskConfig:
        return cls(mask_char=settings.mask_char, separator=settings.separator, helpers=helpers)


__all__ = ["MaskConfig"]
