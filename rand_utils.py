# rand_utils.py
import sys
import logging
import operator
from typing import Optional

import numpy as np

from byte_utils import DEFAULT_DTYPE, as_dtype, byte_width, width_bounds

log = logging.getLogger(__name__)

def _as_int(name: str, value) -> int:
    # numpy integers pass through operator.index; bools do not
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an int, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"{name} must be an int, got {type(value).__name__}") from None

def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a numpy Generator; ``seed=None`` draws fresh OS entropy."""
    if seed is None:
        return np.random.default_rng()
    seed = _as_int("seed", seed)
    if seed < 0: raise ValueError("seed must be >= 0")
    return np.random.default_rng(seed)

def _check_count(count) -> Optional[int]:
    if count is None:
        return None
    count = _as_int("count", count)
    if count < 0: raise ValueError("count must be >= 0")
    return count

class EqByteRandIter:
    """Random integers whose populated byte width cycles 1, 2, ..., W.

    Draw ``i`` fills exactly ``i % W + 1`` low-order bytes; every higher byte
    is zero. Unbounded unless ``count`` is given.
    """

    def __init__(self, dtype=DEFAULT_DTYPE, rng: Optional[np.random.Generator] = None, count: Optional[int] = None):
        self.dtype = as_dtype(dtype)
        self.width = byte_width(self.dtype)
        self.rng = rng if rng is not None else make_rng()
        self.left = _check_count(count)
        self.byt = 0

    @property
    def width_index(self) -> int:
        return self.byt

    @property
    def bounded(self) -> bool:
        return self.left is not None

    def __iter__(self):
        return self

    def __next__(self):
        if self.left is not None:
            if self.left == 0:
                raise StopIteration
            self.left -= 1
        lo, hi = width_bounds(self.byt)
        ret = self.rng.integers(lo, hi, endpoint=True, dtype=self.dtype)
        self.byt = (self.byt + 1) % self.width
        return ret

    @property
    def remaining(self) -> Optional[int]:
        """Draws left before the bounded variant stops; None when unbounded."""
        return self.left

    def __length_hint__(self):
        # counts may exceed sys.maxsize
        if self.left is None or self.left > sys.maxsize:
            return NotImplemented
        return self.left

    def __repr__(self):
        return f"EqByteRandIter(dtype={self.dtype}, byt={self.byt}, left={self.left})"

def _pick_rng(rng, seed):
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    return rng if rng is not None else make_rng(seed)

def rnds_with_eq_byte(dtype=DEFAULT_DTYPE, count: Optional[int] = None, *, rng=None, seed=None) -> EqByteRandIter:
    """Returns an iterator which generates random integers.

    Generates equal quantities of integers represented by 1 byte,
    2 bytes, up to ``itemsize`` bytes of ``dtype``. Infinite when
    ``count`` is None, otherwise stops after ``count`` values.
    """
    it = EqByteRandIter(dtype, rng=_pick_rng(rng, seed), count=count)
    log.debug("width-cycling draws: dtype=%s width=%d count=%s", it.dtype, it.width, count)
    return it

def draw_array(dtype, count: int, *, rng=None, seed=None) -> np.ndarray:
    n = _check_count(count)
    if n is None: raise ValueError("count is required")
    it = EqByteRandIter(dtype, rng=_pick_rng(rng, seed), count=n)
    return np.fromiter(it, dtype=it.dtype, count=n)
