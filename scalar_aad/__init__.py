# scalar_aad/__init__.py
# Scalar reverse-mode Automatic Adjoint Differentiation

from .config import EngineConfig, DEFAULT_CONFIG
from .core import (
    AADError, InvalidArity, CapacityExceeded, InvalidHandle, GraphMismatch,
    OpKind, Tape, global_tape, use_tape, Var,
    topological_order, reverse, zero_gradients,
    grad, grads, grads_list, value, gradient,
    format_trace, print_trace, get_graph_stats,
)
from .ops import leaf, add, subtract, multiply, divide, power, negate, relu

__all__ = [
    # Config
    'EngineConfig',
    'DEFAULT_CONFIG',
    # Errors
    'AADError',
    'InvalidArity',
    'CapacityExceeded',
    'InvalidHandle',
    'GraphMismatch',
    # Graph
    'OpKind',
    'Tape',
    'global_tape',
    'use_tape',
    'Var',
    # Operators
    'leaf',
    'add',
    'subtract',
    'multiply',
    'divide',
    'power',
    'negate',
    'relu',
    # Engine
    'topological_order',
    'reverse',
    'zero_gradients',
    'grad',
    'grads',
    'grads_list',
    'value',
    'gradient',
    # Inspection
    'format_trace',
    'print_trace',
    'get_graph_stats',
]
