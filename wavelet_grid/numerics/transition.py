# numerics/transition.py
from dataclasses import dataclass

from wavelet_grid.core.arrays import Array, xp
from wavelet_grid.errors import InvalidFilterError


@dataclass(frozen=True)
class TransitionMatrices:
    """
    Cascade matrices of the two-scale relation.
    m0 carries the even shifts, m1 the odd shifts.
    """
    m0: Array
    m1: Array

    def __getitem__(self, bit):
        if bit == 0:
            return self.m0
        if bit == 1:
            return self.m1
        raise IndexError(f"Transition matrices are indexed by a single bit, got {bit!r}")

    @property
    def size(self):
        return self.m0.shape[0]

    def scaled(self, factor):
        # new pair, the arrays themselves are immutable
        return TransitionMatrices(self.m0 * factor, self.m1 * factor)


def validate_filter(coeffs, order=None):
    """
    Check that coeffs can be turned into transition matrices.
    order: if given, the filter must have exactly 2*order taps
    """
    coeffs = xp.asarray(coeffs, dtype=xp.float64)
    if coeffs.ndim != 1:
        raise InvalidFilterError(f"Filter must be one-dimensional, got shape {coeffs.shape}")
    ntaps = coeffs.shape[0]
    if ntaps < 2 or ntaps % 2 != 0:
        raise InvalidFilterError(f"Filter needs an even number of taps >= 2, got {ntaps}")
    if order is not None and ntaps != 2 * order:
        raise InvalidFilterError(
            f"Filter of order {order} needs {2 * order} taps, got {ntaps}"
        )
    if not bool(xp.all(xp.isfinite(coeffs))):
        raise InvalidFilterError("Filter contains non-finite taps")
    return coeffs


def setup_matrices(coeffs, order=None):
    """
    Build the transition matrices M0, M1 of dimension N = len(coeffs) - 1:
        M0[i, j] = 2 h[2i - j]      for 0 <= 2i - j <= N
        M1[i, j] = 2 h[2i - j + 1]  for -1 <= 2i - j <= N - 1
    All other entries are zero.
    """
    coeffs = validate_filter(coeffs, order)
    N = coeffs.shape[0] - 1

    rows = xp.arange(N)[:, None]
    cols = xp.arange(N)[None, :]
    shift = 2 * rows - cols

    # clip only keeps the gather in bounds, masked entries are dropped anyway
    even = (shift >= 0) & (shift <= N)
    M0 = xp.where(even, 2.0 * coeffs[xp.clip(shift, 0, N)], 0.0)

    odd = (shift >= -1) & (shift <= N - 1)
    M1 = xp.where(odd, 2.0 * coeffs[xp.clip(shift + 1, 0, N)], 0.0)

    return TransitionMatrices(M0, M1)
