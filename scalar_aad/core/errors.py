# scalar_aad/core/errors.py


class AADError(Exception):
    """Base class for all engine errors."""


class InvalidArity(AADError, ValueError):
    """An operator node was built with the wrong number of operands."""

    def __init__(self, op, got: int):
        super().__init__(f"{op.name} expects {op.arity} operand(s), got {got}")
        self.op = op
        self.got = got


class CapacityExceeded(AADError, RuntimeError):
    """The tape reached its configured max_nodes."""

    def __init__(self, max_nodes: int):
        super().__init__(f"Tape capacity exceeded (max_nodes={max_nodes})")
        self.max_nodes = max_nodes


class InvalidHandle(AADError, IndexError):
    """An operand index does not name a node on the tape."""


class GraphMismatch(AADError, ValueError):
    """Handles from two different tapes were combined."""
