# scalar_aad/core/tape.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

import numpy as np

from ..config import DEFAULT_CONFIG, EngineConfig
from .errors import CapacityExceeded, InvalidArity, InvalidHandle
from .node import Node, OpKind


class Tape:
    """
    Graph store: owns every node of a computation, in creation order.

    Node identity is the integer index into `nodes`. Nodes are never freed
    individually; the whole graph goes away with the tape (or `reset`).
    """
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.nodes: List[Node] = []

    def __len__(self):
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def reset(self):
        self.nodes.clear()

    def _check_capacity(self):
        max_nodes = self.config.max_nodes
        if max_nodes is not None and len(self.nodes) >= max_nodes:
            raise CapacityExceeded(max_nodes)

    def _push(self, node: Node) -> int:
        self._check_capacity()
        self.nodes.append(node)
        return len(self.nodes) - 1

    def create_leaf(self, value, name: Optional[str] = None) -> int:
        """Append a LEAF node holding `value`; return its index."""
        return self._push(Node(value=np.float64(value), name=name))

    def create_op(self, op: OpKind, operands: Sequence[int], value,
                  name: Optional[str] = None) -> int:
        """
        Append an operator node. `value` is the already computed forward
        result; `operands` are indices of existing nodes on this tape.
        """
        operands = tuple(operands)
        if len(operands) != op.arity:
            raise InvalidArity(op, len(operands))
        for idx in operands:
            if not 0 <= idx < len(self.nodes):
                raise InvalidHandle(f"operand {idx} is not a node of this tape")
        return self._push(Node(value=np.float64(value), op=op, operands=operands, name=name))

    def node(self, idx: int) -> Node:
        if not 0 <= idx < len(self.nodes):
            raise InvalidHandle(f"{idx} is not a node of this tape")
        return self.nodes[idx]

    def value(self, idx: int) -> np.float64:
        return self.node(idx).value

    def gradient(self, idx: int) -> np.float64:
        return self.node(idx).grad


# Global singleton tape (simple and practical for eager use)
global_tape = Tape()


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily use a fresh tape:
        with use_tape():
            ... build computation ...
            reverse(y)
    """
    from . import tape as _tape_mod  # local import to rebind the module global
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
