"""
maskit – rule-based field masking for nested data.

Import path convention::

    from maskit import Maskit, Rule
    from maskit.kernel.errors import DuplicateRuleKeyError
    from maskit.adapters.mongodb import MongoMaskStore
"""

from maskit.application.masking import (
    CompiledMask,
    FixedLength,
    FunctionRegistry,
    HelperMask,
    LiteralReplace,
    MaskConfig,
    Maskit,
    ParamIn,
    RegisteredMask,
    RegisteredPredicate,
    Rule,
)

__version__ = "0.1.0"
__all__ = [
    "CompiledMask",
    "FixedLength",
    "FunctionRegistry",
    "HelperMask",
    "LiteralReplace",
    "MaskConfig",
    "Maskit",
    "ParamIn",
    "RegisteredMask",
    "RegisteredPredicate",
    "Rule",
    "__version__",
]
