# scalar_aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np

from ..config import EngineConfig
from .engine import reverse
from .tape import Tape, use_tape
from .var import Var


def value(x: Any) -> Any:
    """Return the numeric value of a Var; pass through plain numbers unchanged."""
    return x.data if isinstance(x, Var) else x


def gradient(x: Var) -> np.float64:
    """Return the gradient accumulated on a Var."""
    return x.grad


def _ensure_var(v: Any, *, name: str) -> Var:
    """Wrap a plain value as a leaf if needed; otherwise return the Var itself."""
    from ..ops.arithmetic import leaf
    return v if isinstance(v, Var) else leaf(v, name=name)


def _backprop(f: Callable, args) -> Var:
    y = f(args)
    if not isinstance(y, Var):
        # constant output: depends on no input
        y = _ensure_var(y, name="y")
    reverse(y, seed=1.0)
    return y


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Var], Var], x0: float,
         config: Optional[EngineConfig] = None) -> np.float64:
    """
    Gradient of a scalar function y=f(x) at x0 (single input).
    Runs one reverse pass within a fresh, isolated tape.
    """
    with use_tape(Tape(config)):
        x = _ensure_var(x0, name="x")
        _backprop(f, x)
        return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Var]], Var],
          inputs: Dict[str, float],
          config: Optional[EngineConfig] = None) -> Dict[str, np.float64]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Var} and returning a Var
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: gradient}  # same key order as `inputs`
    """
    with use_tape(Tape(config)):
        vars_ad: Dict[str, Var] = {k: _ensure_var(v, name=k) for k, v in inputs.items()}
        _backprop(f, vars_ad)
        return {k: vars_ad[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Var]], Var],
               x0_list: Iterable[float],
               config: Optional[EngineConfig] = None) -> List[np.float64]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_tape(Tape(config)):
        xs: List[Var] = [_ensure_var(v, name=f"x{i}") for i, v in enumerate(x0_list)]
        _backprop(f, xs)
        return [x.grad for x in xs]
