# range_utils.py
import sys
import logging
import operator

from byte_utils import SIZE_MAX

log = logging.getLogger(__name__)

class InvalidArgument(ValueError):
    """Raised for split arguments outside the supported domain."""

def _check_index(name: str, value, lo: int) -> int:
    # numpy integers pass through operator.index; bools do not count as indexes
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} must be an int, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise InvalidArgument(f"{name} must be an int, got {type(value).__name__}") from None
    if not (lo <= value <= SIZE_MAX):
        raise InvalidArgument(f"{name} must be in [{lo}, {SIZE_MAX}], got {value}")
    return value

class RangeIter:
    """Yields ``seg`` contiguous ranges covering ``[0, lim)``.

    The first ``lim % seg`` ranges are one element longer than the rest.
    Raises InvalidArgument when ``seg < 1`` or either argument is outside
    ``[0, SIZE_MAX]``.
    """

    def __init__(self, seg: int, lim: int):
        seg = _check_index("segments", seg, 1)
        lim = _check_index("limit", lim, 0)
        self.lim = lim
        self.stp = lim // seg
        self.stp_adj = lim % seg
        self.idx = 0
        # nothing to cover when lim == 0
        self.left = seg if lim > 0 else 0

    def __iter__(self):
        return self

    def __next__(self) -> range:
        if self.left == 0:
            raise StopIteration
        adj = 0
        if self.stp_adj > 0:
            self.stp_adj -= 1
            adj = 1
        end = min(self.idx + self.stp + adj, self.lim)
        rng = range(self.idx, end)
        self.idx = end
        self.left -= 1
        return rng

    @property
    def remaining(self) -> int:
        return self.left

    def __length_hint__(self):
        # segment counts may exceed sys.maxsize
        return self.left if self.left <= sys.maxsize else NotImplemented

    def copy(self) -> "RangeIter":
        dup = RangeIter.__new__(RangeIter)
        dup.__dict__.update(self.__dict__)
        return dup

    def __repr__(self):
        return f"RangeIter(idx={self.idx}, stp={self.stp}, lim={self.lim}, left={self.left})"

def rngs(seg: int, lim: int) -> RangeIter:
    """Returns a range iterator.

        seg=2,  lim=6: [0..3, 3..6]
        seg=2,  lim=7: [0..4, 4..7]
        seg=4, lim=10: [0..3, 3..6, 6..8, 8..10]

    ``seg`` is the number of segments, ``lim`` the total number of elements.
    Raises InvalidArgument when ``seg < 1``.
    """
    it = RangeIter(seg, lim)
    log.debug("splitting [0, %d) into %d segments", lim, seg)
    return it

def split_points(seg: int, lim: int) -> list:
    rs = list(rngs(seg, lim))
    if not rs:
        return []
    return [r.start for r in rs] + [rs[-1].stop]

def chunk(seq, seg: int):
    """Slice ``seq`` into ``seg`` near-equal contiguous pieces."""
    return (seq[r.start:r.stop] for r in rngs(seg, len(seq)))
