# scalar_aad/core/__init__.py

"""
Core public API for the scalar AAD package.

Exports:
    Var               : Handle to one node of a tape.
    Tape              : The graph store that owns every node of a computation.
    global_tape       : The default tape new leaves are recorded on.
    use_tape          : Context manager to temporarily switch the active tape.
    OpKind            : Operator kinds (leaf, add, mul, pow, relu).
    reverse           : Run a single reverse pass from an output handle.
    zero_gradients    : Reset gradients of a subgraph or tape to zero.
    topological_order : Operands-first ordering of a handle's subgraph.
    grad, grads       : Convenience: gradients of a function at a point.
    value, gradient   : Convenience accessors.
"""

from .errors import AADError, InvalidArity, CapacityExceeded, InvalidHandle, GraphMismatch
from .node import Node, OpKind
from .tape import Tape, global_tape, use_tape
from .var import Var
from .topo import topological_order
from .engine import reverse, zero_gradients, apply_gradient_rule, clip_gradient
from .seeds import grad, grads, grads_list, value, gradient
from .graph_utils import format_trace, print_trace, get_graph_stats, print_graph_summary

__all__ = [
    "AADError", "InvalidArity", "CapacityExceeded", "InvalidHandle", "GraphMismatch",
    "Node", "OpKind",
    "Tape", "global_tape", "use_tape",
    "Var",
    "topological_order",
    "reverse", "zero_gradients", "apply_gradient_rule", "clip_gradient",
    "grad", "grads", "grads_list", "value", "gradient",
    "format_trace", "print_trace", "get_graph_stats", "print_graph_summary",
]
