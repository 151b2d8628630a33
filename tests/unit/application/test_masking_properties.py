"""Property-based tests for masking invariants."""

from __future__ import annotations

import copy
from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from maskit import Maskit, Rule
from maskit.application.masking import canonicalize, is_primitive
from maskit.kernel.errors import DuplicateRuleKeyError
from maskit.testing.strategies import document_strategy

MASKIT = Maskit()
MASK_ALL = MASKIT.compile()


def _shape(node: Any) -> Any:
    if isinstance(node, dict):
        return {key: _shape(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_shape(item) for item in node]
    return "leaf"


def _pairs(original: Any, masked: Any) -> list[tuple[Any, Any]]:
    if isinstance(original, dict):
        return [pair for key in original for pair in _pairs(original[key], masked[key])]
    if isinstance(original, list):
        return [pair for a, b in zip(original, masked) for pair in _pairs(a, b)]
    return [(original, masked)]


@settings(max_examples=50, deadline=None)
@given(document_strategy())
def test_empty_rule_set_is_identity(doc: dict[str, Any]) -> None:
    assert MASKIT.apply(doc, values=[]) == doc


@settings(max_examples=50, deadline=None)
@given(document_strategy(), st.sampled_from(list("abcdefghij")))
def test_apply_never_mutates_input(doc: dict[str, Any], key: str) -> None:
    snapshot = copy.deepcopy(doc)
    rule = Rule(key, lambda value, config: "masked")
    MASKIT.apply(doc, values=[rule])
    assert doc == snapshot


@settings(max_examples=50, deadline=None)
@given(document_strategy())
def test_mask_everything_preserves_shape_and_lengths(doc: dict[str, Any]) -> None:
    snapshot = copy.deepcopy(doc)
    masked = MASK_ALL(doc)
    assert doc == snapshot
    assert _shape(masked) == _shape(doc)
    for original, leaf in _pairs(doc, masked):
        assert is_primitive(original)
        assert leaf == "*" * len(canonicalize(original))


@settings(deadline=None)
@given(st.text(alphabet="abc.", min_size=1).filter(lambda k: "" not in k.split(".")), st.integers(0, 5))
def test_duplicate_keys_always_fail(key: str, length: int) -> None:
    with pytest.raises(DuplicateRuleKeyError):
        MASKIT.apply({}, values=[Rule(key, length), Rule(key, "x")])


@settings(deadline=None)
@given(st.one_of(st.text(), st.integers()), st.integers(0, 30))
def test_fixed_length_yields_exactly_n_chars(value: Any, length: int) -> None:
    assert MASKIT.apply({"v": value}, values=[Rule("v", length)]) == {"v": "*" * length}
