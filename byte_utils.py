# byte_utils.py
import numpy as np

SIZE_MAX = 2**64 - 1  # largest index value (usize)

# supported element types and their fixed width in bytes
BYTE_WIDTHS = {
    np.dtype(np.uint8): 1,
    np.dtype(np.uint16): 2,
    np.dtype(np.uint32): 4,
    np.dtype(np.uint64): 8,
}
DEFAULT_DTYPE = np.dtype(np.uint64)

def as_dtype(dtype) -> np.dtype:
    try:
        dt = np.dtype(dtype)
    except TypeError:
        raise TypeError(f"Not a numpy dtype: {dtype!r}") from None
    if dt not in BYTE_WIDTHS:
        raise TypeError(f"Unsupported integer type {dt} (expected uint8, uint16, uint32 or uint64)")
    return dt

def byte_width(dtype) -> int:
    return BYTE_WIDTHS[as_dtype(dtype)]

def width_bounds(b: int) -> tuple:
    """Inclusive (low, high) for a value populating exactly ``b + 1`` low bytes."""
    if b < 0: raise ValueError("byte index must be >= 0")
    lo = 0 if b == 0 else 1 << (b * 8)
    hi = (1 << ((b + 1) * 8)) - 1
    return lo, hi

def to_le_bytes(value, dtype) -> bytes:
    dt = as_dtype(dtype)
    return np.array([value], dtype=dt.newbyteorder("<")).tobytes()

def populated_bytes(value, dtype) -> int:
    # index of the highest non-zero byte + 1, never below 1
    raw = np.frombuffer(to_le_bytes(value, dtype), dtype=np.uint8)
    nz = np.flatnonzero(raw)
    return int(nz[-1]) + 1 if nz.size else 1
