"""Built-in helper masks.

Each helper takes a primitive value (canonicalised to a string first) and the
active :class:`~maskit.application.masking.config.MaskConfig` and returns the
masked string.  They are building blocks for custom masks and
:class:`~maskit.application.masking.rules.HelperMask` rules; nothing applies
them automatically by field name.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping

from maskit.application.masking.classifier import canonicalize

if TYPE_CHECKING:
    from maskit.application.masking.config import MaskConfig

HelperFn = Callable[[Any, "MaskConfig"], str]

_NON_DIGIT = re.compile(r"\D")


def _hide(text: str, config: MaskConfig) -> str:
    return config.mask_char * len(text)


def first(value: Any, config: MaskConfig) -> str:
    """Mask the first ``config.separator`` segment (``"John Doe"`` -> ``"**** Doe"``)."""
    text = canonicalize(value)
    parts = text.split(config.separator)
    if len(parts) == 1:
        return _hide(text, config)
    return config.separator.join([_hide(parts[0], config), *parts[1:]])


def last(value: Any, config: MaskConfig) -> str:
    """Mask the last ``config.separator`` segment (``"John Doe"`` -> ``"John ***"``)."""
    text = canonicalize(value)
    parts = text.split(config.separator)
    if len(parts) == 1:
        return _hide(text, config)
    return config.separator.join([*parts[:-1], _hide(parts[-1], config)])


def all(value: Any, config: MaskConfig) -> str:  # noqa: A001
    return _hide(canonicalize(value), config)


def email(value: Any, config: MaskConfig) -> str:
    """Mask the local part, keep the domain; no ``@`` masks everything."""
    text = canonicalize(value)
    local, _, domain = text.partition("@")
    if not domain:
        return _hide(text, config)
    return f"{_hide(local, config)}@{domain}"


def phone(value: Any, config: MaskConfig) -> str:
    """Keep the last four digits; separators are dropped."""
    digits = _NON_DIGIT.sub("", canonicalize(value))
    return config.mask_char * max(0, len(digits) - 4) + digits[-4:]


DEFAULT_HELPERS: Mapping[str, HelperFn] = MappingProxyType(
    {
        "first": first,
        "last": last,
        "all": all,
        "email": email,
        "phone": phone,
    }
)

__all__ = ["DEFAULT_HELPERS", "HelperFn", "all", "email", "first", "last", "phone"]
