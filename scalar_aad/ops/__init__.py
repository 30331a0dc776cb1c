# scalar_aad/ops/__init__.py

# Convenience re-exports so users can do: from scalar_aad.ops import multiply, relu, ...
from .arithmetic import leaf, add, subtract, multiply, divide, power, negate
from .activation import relu

__all__ = [
    "leaf",
    "add", "subtract", "multiply", "divide", "power", "negate",
    "relu",
]
