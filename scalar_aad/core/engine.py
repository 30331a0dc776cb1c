# scalar_aad/core/engine.py
from __future__ import annotations
import logging
from typing import Iterable, Union

import numpy as np

from . import tape as tape_mod
from .node import Node, OpKind
from .tape import Tape
from .topo import postorder
from .var import Var

logger = logging.getLogger(__name__)


def clip_gradient(g, lo: float, hi: float) -> np.float64:
    """Clamp a gradient into [lo, hi]. NaN stays NaN."""
    return np.float64(np.clip(g, lo, hi))


def zero_gradients(target: Union[Var, Tape, None] = None):
    """
    Set gradients to zero.

    target : Var  -> every node reachable from that handle
             Tape -> every node on that tape
             None -> every node on the active tape
    """
    if isinstance(target, Var):
        nodes: Iterable[Node] = (target.tape.node(i) for i in postorder(target.tape, target.idx))
    else:
        nodes = target if target is not None else tape_mod.global_tape
    for node in nodes:
        node.grad = np.float64(0.0)


def _accumulate(tape: Tape, idx: int, contribution):
    """operand.grad += contribution, then clamp when clipping per update."""
    node = tape.nodes[idx]
    node.grad = node.grad + contribution
    cfg = tape.config
    if cfg.clip_mode == "update":
        clipped = clip_gradient(node.grad, cfg.clip_min, cfg.clip_max)
        if not np.isnan(clipped) and clipped != node.grad:
            logger.debug("clipped gradient of node %d from %g to %g", idx, node.grad, clipped)
        node.grad = clipped


def apply_gradient_rule(tape: Tape, idx: int):
    """
    Push the gradient of node `idx` into its operands.

    Rules, for c = op(a[, b]):
      add  : a += c.grad;                 b += c.grad
      mul  : a += c.grad * b;             b += c.grad * a
      pow  : a += b * a**(b-1) * c.grad;  b += log(a) * c * c.grad   (only if a > 0)
      relu : a += c.grad if a > 0 else 0
    Leaves have no rule.
    """
    c = tape.nodes[idx]
    op = c.op
    if op is OpKind.LEAF:
        return
    ops = c.operands

    if op is OpKind.ADD:
        _accumulate(tape, ops[0], c.grad)
        _accumulate(tape, ops[1], c.grad)

    elif op is OpKind.MUL:
        a, b = tape.nodes[ops[0]], tape.nodes[ops[1]]
        da, db = c.grad * b.value, c.grad * a.value
        _accumulate(tape, ops[0], da)
        _accumulate(tape, ops[1], db)

    elif op is OpKind.POW:
        a, b = tape.nodes[ops[0]], tape.nodes[ops[1]]
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            da = b.value * np.power(a.value, b.value - 1.0) * c.grad
            db = np.log(a.value) * c.value * c.grad if a.value > 0 else None
        _accumulate(tape, ops[0], da)
        if db is not None:
            _accumulate(tape, ops[1], db)

    elif op is OpKind.RELU:
        a = tape.nodes[ops[0]]
        _accumulate(tape, ops[0], c.grad if a.value > 0 else np.float64(0.0))

    else:
        raise ValueError(f"No gradient rule for {op!r}")


def reverse(root: Var, *, seed=1.0, zero_grad: bool = False):
    """
    Run a single reverse pass from `root`.

    Args:
        root: handle of the output to differentiate.
        seed: value written into root.grad (d root / d root = 1 by default).
        zero_grad: zero the reachable subgraph's gradients first.

    Notes:
        - Gradients accumulate across calls; without `zero_grad` (or an
          explicit `zero_gradients`) a second pass adds onto the first.
        - The root's gradient is overwritten with `seed`, not added to.
        - Clipping follows `root.tape.config.clip_mode`. The seeded root is
          never clipped in either mode.
    """
    tape = root.tape
    order = postorder(tape, root.idx)
    logger.debug("reverse pass from node %d over %d node(s)", root.idx, len(order))

    if zero_grad:
        for i in order:
            tape.nodes[i].grad = np.float64(0.0)

    tape.nodes[root.idx].grad = np.float64(seed)

    # Backward sweep; NaN/Inf propagate silently
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in reversed(order):
            apply_gradient_rule(tape, i)

    cfg = tape.config
    if cfg.clip_mode == "final":
        for i in order:
            if i == root.idx:
                continue
            node = tape.nodes[i]
            node.grad = clip_gradient(node.grad, cfg.clip_min, cfg.clip_max)

