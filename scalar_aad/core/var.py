# scalar_aad/core/var.py
from __future__ import annotations
from typing import Tuple

from .node import OpKind
from .tape import Tape


class Var:
    """
    Handle to one node of a Tape.

    A Var is only meaningful together with the tape that created it; two
    handles are equal when they name the same index on the same tape.

    Attributes
    ----------
    tape : Tape
        Owning graph store.
    idx  : int
        Index of the node on `tape`.
    """

    __slots__ = ("tape", "idx")

    def __init__(self, tape: Tape, idx: int):
        self.tape = tape
        self.idx = idx

    @property
    def node(self):
        return self.tape.node(self.idx)

    @property
    def data(self):
        """Forward value."""
        return self.node.value

    @property
    def grad(self):
        """Accumulated gradient."""
        return self.node.grad

    @property
    def op(self) -> OpKind:
        return self.node.op

    @property
    def operands(self) -> Tuple["Var", ...]:
        return tuple(Var(self.tape, i) for i in self.node.operands)

    @property
    def name(self):
        return self.node.name

    def __eq__(self, other):
        return isinstance(other, Var) and other.tape is self.tape and other.idx == self.idx

    def __hash__(self):
        return hash((id(self.tape), self.idx))

    def __repr__(self):
        node = self.node
        label = f", name={node.name!r}" if node.name else ""
        return f"Var({node.value!r}, grad={node.grad!r}, op={node.op.tag}{label})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import subtract
        return subtract(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import subtract
        return subtract(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import divide
        return divide(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import divide
        return divide(other, self)

    def __neg__(self):
        from ..ops.arithmetic import negate
        return negate(self)

    def __pow__(self, other):
        from ..ops.arithmetic import power
        return power(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import power
        return power(other, self)

    def relu(self):
        from ..ops.activation import relu
        return relu(self)
