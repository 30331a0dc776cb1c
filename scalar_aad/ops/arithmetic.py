# scalar_aad/ops/arithmetic.py
import numpy as np

from ..core import tape as tape_mod  # Use module access for use_tape() compatibility
from ..core.errors import GraphMismatch
from ..core.node import OpKind
from ..core.var import Var

_NUMERIC = (int, float, np.integer, np.floating)


def leaf(value, name=None, tape=None):
    """Create an input node on `tape` (default: the active tape)."""
    if isinstance(value, bool) or not isinstance(value, _NUMERIC):
        raise TypeError(f"leaf only accepts real scalars (int, float), but got {type(value)}")
    tape = tape if tape is not None else tape_mod.global_tape
    return Var(tape, tape.create_leaf(value, name=name))


def _tape_of(*xs):
    """The tape shared by every Var in `xs`; the active tape if there is none."""
    tapes = [x.tape for x in xs if isinstance(x, Var)]
    if not tapes:
        return tape_mod.global_tape
    first = tapes[0]
    for t in tapes[1:]:
        if t is not first:
            raise GraphMismatch("operands belong to different tapes")
    return first


def _as_var(x, tape):
    """Ensure x is a Var; otherwise wrap it as a fresh leaf on `tape`."""
    return x if isinstance(x, Var) else leaf(x, tape=tape)


def _binary(x, y, f, op):
    """
    Generic binary primitive:
      - computes out.value = f(x.value, y.value) with IEEE semantics
        (NaN/Inf propagate, numpy warnings silenced)
      - records a node of kind `op` with operands [x, y]
    """
    tape = _tape_of(x, y)
    x = _as_var(x, tape)
    y = _as_var(y, tape)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        val = f(x.data, y.data)
    return Var(tape, tape.create_op(op, (x.idx, y.idx), val))


def add(x, y):      return _binary(x, y, np.add,      OpKind.ADD)
def multiply(x, y): return _binary(x, y, np.multiply, OpKind.MUL)


def power(x, y):
    """
    Real power: out.value = x.value ** y.value.

    A negative base with a non-integer exponent yields NaN, and a zero base
    with a negative exponent yields Inf; both propagate instead of raising.
    """
    return _binary(x, y, np.power, OpKind.POW)


def negate(x):
    """
    Negation as a fresh, unlinked leaf holding -x.value.

    The result has no operand edge back to `x`, so no gradient reaches `x`
    through it.
    """
    tape = _tape_of(x)
    x = _as_var(x, tape)
    return leaf(-x.data, tape=tape)


def subtract(x, y):
    """x - y, built as add(x, negate(y)). Gradient does not reach `y`."""
    tape = _tape_of(x, y)
    return add(_as_var(x, tape), negate(_as_var(y, tape)))


def divide(x, y):
    """x / y, built as multiply(x, power(y, leaf(-1)))."""
    tape = _tape_of(x, y)
    x = _as_var(x, tape)
    y = _as_var(y, tape)
    return multiply(x, power(y, leaf(-1.0, tape=tape)))
