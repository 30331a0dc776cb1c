# scalar_aad/core/topo.py
from __future__ import annotations
from typing import List

from .tape import Tape
from .var import Var


def postorder(tape: Tape, root: int) -> List[int]:
    """
    Depth-first post-order over operand edges starting at `root`.

    Operands are visited left to right before their parent is emitted, and
    every reachable index appears exactly once. The walk uses an explicit
    stack so long chains do not hit the interpreter's recursion limit.
    """
    order: List[int] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        idx, expanded = stack.pop()
        if expanded:
            order.append(idx)
            continue
        if idx in visited:
            continue
        visited.add(idx)
        stack.append((idx, True))
        # reversed so the leftmost operand is popped first
        for child in reversed(tape.node(idx).operands):
            if child not in visited:
                stack.append((child, False))
    return order


def topological_order(root: Var) -> List[Var]:
    """All nodes reachable from `root`, each after all of its operands; `root` last."""
    return [Var(root.tape, i) for i in postorder(root.tape, root.idx)]
