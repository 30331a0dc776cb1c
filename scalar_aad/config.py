"""
Engine configuration.

Clipping range, clipping mode and graph capacity are set here.
No hardcoded values in the rest of the package.
"""

from dataclasses import dataclass
from typing import Optional

# Range for gradient clipping
MIN_RANGE = -10.0
MAX_RANGE = 10.0

CLIP_MODES = ("update", "final", None)


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for a Tape and the reverse passes run over it.

    Attributes
    ----------
    clip_min, clip_max : float
        Symmetric (by default) range every gradient is clamped into.
    clip_mode : {"update", "final", None}
        "update" clamps an operand right after each contribution is added,
        so repeated contributions are each clamped. "final" clamps every
        reachable node once after the pass. None disables clipping.
    max_nodes : Optional[int]
        Hard bound on the number of nodes a tape may hold. None = unbounded.
    """

    clip_min: float = MIN_RANGE
    clip_max: float = MAX_RANGE
    clip_mode: Optional[str] = "update"
    max_nodes: Optional[int] = None

    def __post_init__(self):
        if self.clip_min > self.clip_max:
            raise ValueError(
                f"clip_min must be <= clip_max, got [{self.clip_min}, {self.clip_max}]"
            )
        if self.clip_mode not in CLIP_MODES:
            raise ValueError(f"Unknown clip mode: {self.clip_mode!r}")
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError(f"max_nodes must be >= 1, got {self.max_nodes}")


DEFAULT_CONFIG = EngineConfig()
