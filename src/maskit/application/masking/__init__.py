"""Application masking – rule engine, compiler and portable representation."""
from maskit.application.masking.classifier import ValueKind, canonicalize, classify, is_primitive
from maskit.application.masking.compiler import CompiledMask, MaskCompiler
from maskit.application.masking.config import MaskConfig
from maskit.application.masking.engine import MaskEngine
from maskit.application.masking.facade import Maskit
from maskit.application.masking.helpers import DEFAULT_HELPERS
from maskit.application.masking.log_filter import MaskingLogFilter
from maskit.application.masking.registry import FunctionRegistry
from maskit.application.masking.rules import (
    CustomMask,
    CustomPredicate,
    FixedLength,
    HelperMask,
    LiteralReplace,
    ParamIn,
    RegisteredMask,
    RegisteredPredicate,
    Rule,
)
from maskit.application.masking.schema import validate_rules
from maskit.application.masking.serialization import MaskSerializer
from maskit.application.masking.store import CompiledMaskStore, MaskRecord, save_compiled_mask

__all__ = [
    "DEFAULT_HELPERS",
    "CompiledMask",
    "CompiledMaskStore",
    "CustomMask",
    "CustomPredicate",
    "FixedLength",
    "FunctionRegistry",
    "HelperMask",
    "LiteralReplace",
    "MaskCompiler",
    "MaskConfig",
    "MaskEngine",
    "MaskRecord",
    "MaskSerializer",
    "Maskit",
    "MaskingLogFilter",
    "ParamIn",
    "RegisteredMask",
    "RegisteredPredicate",
    "Rule",
    "ValueKind",
    "canonicalize",
    "classify",
    "is_primitive",
    "save_compiled_mask",
    "validate_rules",
]
