"""
Graph store tests: node creation, arity/handle validation, capacity and
tape isolation.
"""

import numpy as np
import pytest

from scalar_aad import (
    EngineConfig, Tape, use_tape, leaf, add, multiply, OpKind, Var,
    InvalidArity, CapacityExceeded, InvalidHandle, GraphMismatch,
)
from scalar_aad.core import tape as tape_mod


def test_leaf_starts_with_zero_gradient():
    tape = Tape()
    x = leaf(3, name="x", tape=tape)
    assert x.tape is tape
    assert x.op is OpKind.LEAF
    assert x.operands == ()
    assert isinstance(x.data, np.float64)
    assert x.data == 3.0
    assert x.grad == 0.0
    assert x.name == "x"
    assert len(tape) == 1


def test_op_node_records_operands_in_order():
    with use_tape() as tape:
        a = leaf(1.0)
        b = leaf(2.0)
        c = add(b, a)
        assert c.op is OpKind.ADD
        assert c.operands == (b, a)
        assert tape.node(c.idx).operands == (b.idx, a.idx)
        assert c.grad == 0.0


def test_create_op_rejects_wrong_arity():
    tape = Tape()
    i = tape.create_leaf(1.0)
    with pytest.raises(InvalidArity):
        tape.create_op(OpKind.ADD, (i,), 1.0)
    with pytest.raises(InvalidArity):
        tape.create_op(OpKind.RELU, (i, i), 1.0)
    with pytest.raises(ValueError):
        tape.create_op(OpKind.MUL, (), 1.0)
    assert len(tape) == 1


def test_create_op_rejects_unknown_operand():
    tape = Tape()
    i = tape.create_leaf(1.0)
    with pytest.raises(InvalidHandle):
        tape.create_op(OpKind.ADD, (i, 7), 1.0)
    with pytest.raises(InvalidHandle):
        tape.node(-1)


def test_capacity_exceeded():
    tape = Tape(EngineConfig(max_nodes=3))
    a = leaf(1.0, tape=tape)
    b = leaf(2.0, tape=tape)
    add(a, b)
    with pytest.raises(CapacityExceeded) as exc:
        leaf(4.0, tape=tape)
    assert exc.value.max_nodes == 3
    with pytest.raises(CapacityExceeded):
        multiply(a, b)
    assert len(tape) == 3


def test_unbounded_by_default():
    tape = Tape()
    for i in range(2000):
        leaf(float(i), tape=tape)
    assert len(tape) == 2000


def test_reset_discards_whole_graph():
    tape = Tape()
    add(leaf(1.0, tape=tape), leaf(2.0, tape=tape))
    tape.reset()
    assert len(tape) == 0


def test_use_tape_isolates_and_restores():
    outer = tape_mod.global_tape
    with use_tape() as inner:
        assert tape_mod.global_tape is inner
        assert inner is not outer
        x = leaf(1.0)
        assert x.tape is inner
    assert tape_mod.global_tape is outer

    given = Tape()
    with use_tape(given) as t:
        assert t is given


def test_handles_from_different_tapes_do_not_mix():
    a = leaf(1.0, tape=Tape())
    b = leaf(2.0, tape=Tape())
    with pytest.raises(GraphMismatch):
        add(a, b)


def test_leaf_rejects_non_numeric():
    with use_tape():
        with pytest.raises(TypeError):
            leaf("3")
        with pytest.raises(TypeError):
            leaf(True)


def test_var_identity():
    tape = Tape()
    x = leaf(1.0, tape=tape)
    same = Var(tape, x.idx)
    assert x == same
    assert hash(x) == hash(same)
    assert x != Var(Tape(), x.idx)
    assert len({x, same}) == 1


def test_config_validation():
    with pytest.raises(ValueError):
        EngineConfig(clip_min=1.0, clip_max=-1.0)
    with pytest.raises(ValueError):
        EngineConfig(clip_mode="sometimes")
    with pytest.raises(ValueError):
        EngineConfig(max_nodes=0)
    cfg = EngineConfig()
    assert (cfg.clip_min, cfg.clip_max, cfg.clip_mode, cfg.max_nodes) == (-10.0, 10.0, "update", None)


def test_use_tape_keeps_an_empty_configured_tape():
    cfg = EngineConfig(clip_mode=None, max_nodes=2)
    given = Tape(cfg)
    assert len(given) == 0
    with use_tape(given) as t:
        assert t is given
        assert tape_mod.global_tape is given
        assert t.config is cfg
        leaf(1.0)
        leaf(2.0)
        with pytest.raises(CapacityExceeded):
            leaf(3.0)
