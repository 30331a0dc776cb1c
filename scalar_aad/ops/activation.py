# scalar_aad/ops/activation.py
import numpy as np

from ..core.node import OpKind
from ..core.var import Var
from .arithmetic import _as_var, _tape_of


def relu(x):
    """Rectified linear unit: out.value = max(0, x.value)."""
    tape = _tape_of(x)
    x = _as_var(x, tape)
    val = np.maximum(np.float64(0.0), x.data)
    return Var(tape, tape.create_op(OpKind.RELU, (x.idx,), val))
