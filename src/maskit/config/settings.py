"""Config – Settings base class and MaskitSettings."""
from __future__ import annotations

import dataclasses

from maskit.config.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class MaskitSettings(Settings):
    """Runtime settings, read from ``MASKIT_*`` environment variables.

    ``mask_char`` and ``separator`` seed :class:`~maskit.MaskConfig`; the
    ``mongo_*`` fields configure :class:`~maskit.adapters.mongodb.MongoMaskStore`.
    """

    _prefix: dataclasses.ClassVar[str] = "MASKIT"

    mask_char: str = "*"
    separator: str = " "
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "maskit"
    mongo_collection: str = "compiledMasks"

    def _validate(self) -> None:
        if len(self.mask_char) != 1:
            raise InvalidSettingValueError(
                "mask_char", self.mask_char, "must be exactly one character"
            )
        if not self.separator:
            raise InvalidSettingValueError("separator", self.separator, "must not be empty")


__all__ = ["MaskitSettings", "Settings"]
