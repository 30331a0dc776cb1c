# scalar_aad/core/node.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class OpKind(Enum):
    """Operator kind of a node; selects its arity and gradient rule."""

    LEAF = ("leaf", 0)
    ADD = ("add", 2)
    MUL = ("mul", 2)
    POW = ("pow", 2)
    RELU = ("relu", 1)

    def __init__(self, tag: str, arity: int):
        self.tag = tag
        self.arity = arity


@dataclass
class Node:
    """
    One node on the tape, produced by a leaf constructor or a primitive op.

    Attributes
    ----------
    value    : np.float64
        Forward (primal) value, fixed at creation.
    op       : OpKind
        Operator kind.
    operands : Tuple[int, ...]
        Tape indices of the operands, in operand order. Never mutated.
    grad     : np.float64
        Adjoint accumulator, 0.0 until a reverse pass writes into it.
    name     : Optional[str]
        Debug label.
    """
    value: np.float64
    op: OpKind = OpKind.LEAF
    operands: Tuple[int, ...] = ()
    grad: np.float64 = field(default_factory=lambda: np.float64(0.0))
    name: Optional[str] = None
