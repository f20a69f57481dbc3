"""Tests for the check registry."""

import pytest

import layoutrel.engine  # noqa: F401  registers the built-in checks
from layoutrel.engine.registry import Arity, CheckRegistry, CheckSpec, get_registry


async def _noop(*args, **kwargs):
    return True


def test_register_and_get():
    reg = CheckRegistry()
    spec = CheckSpec(name="noop", arity=Arity.ONE, fn=_noop)
    reg.register(spec)
    assert reg.get("noop") is spec
    assert "noop" in reg
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = CheckRegistry()
    reg.register(CheckSpec(name="noop", arity=Arity.ONE, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(CheckSpec(name="noop", arity=Arity.PAIR, fn=_noop))


def test_all_sorted_by_name():
    reg = CheckRegistry()
    for name in ["b", "c", "a"]:
        reg.register(CheckSpec(name=name, arity=Arity.ONE, fn=_noop))
    assert [s.name for s in reg.all()] == ["a", "b", "c"]


def test_builtin_checks_registered():
    reg = get_registry()
    arities = {s.name: s.arity for s in reg.all()}
    assert arities == {
        "are_aligned": Arity.PAIR,
        "edge_distance": Arity.PAIR,
        "in_order": Arity.SEQUENCE,
        "intersection_area_ratio": Arity.PAIR,
        "is_in_viewport": Arity.ONE,
        "relative_position": Arity.PAIR,
        "visible_area_ratio": Arity.ONE,
    }
