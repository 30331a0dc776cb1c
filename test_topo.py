"""
Topological sorter: operands before parents, each node once, left-to-right.
"""

from scalar_aad import use_tape, leaf, add, multiply, power, relu, topological_order
from scalar_aad.core.topo import postorder


def _assert_valid(order):
    pos = {v: i for i, v in enumerate(order)}
    assert len(pos) == len(order)  # each node exactly once
    for v in order:
        for child in v.operands:
            assert pos[child] < pos[v]


def test_order_is_operands_first_left_to_right():
    with use_tape():
        x = leaf(1.0)
        y = leaf(2.0)
        z = add(x, y)
        w = multiply(z, x)
        assert topological_order(w) == [x, y, z, w]


def test_shared_nodes_emitted_once():
    with use_tape():
        x = leaf(2.0)
        c = add(x, x)
        assert topological_order(c) == [x, c]


def test_only_reachable_subgraph_is_sorted():
    with use_tape() as tape:
        a = leaf(1.0)
        b = leaf(2.0)
        unrelated = multiply(a, b)
        c = relu(a)
        order = topological_order(c)
        assert order == [a, c]
        assert unrelated not in order
        assert len(tape) == 4


def test_diamond_graph_is_valid():
    with use_tape():
        a = leaf(1.5)
        b = leaf(-0.5)
        p = multiply(a, b)
        q = add(a, p)
        r = power(q, b)
        s = add(relu(p), r)
        t = multiply(s, q)
        order = topological_order(t)
        _assert_valid(order)
        assert order[-1] == t
        assert set(order) == {a, b, p, q, r, s, t, s.operands[0]}


def test_leaf_root():
    with use_tape():
        x = leaf(4.0)
        assert topological_order(x) == [x]


def test_deep_chain_has_no_recursion_limit():
    with use_tape() as tape:
        x = leaf(1.0)
        y = x
        for _ in range(5000):
            y = add(y, x)
        order = postorder(tape, y.idx)
        assert len(order) == 5001
        assert order[0] == x.idx
        assert order[-1] == y.idx
