# core/filters.py
import math

import pywt

from wavelet_grid.core.arrays import xp
from wavelet_grid.errors import InvalidFilterError


def get_filter_coefficients(order, low_pass=True):
    """
    Daubechies filter taps of the given order.

    The taps are scaled so that sum(h) = 1, i.e. the two-scale relation
    reads phi(x) = sum_k 2 h_k phi(2x - k). The high-pass taps follow the
    alternating flip g_k = (-1)^k h_{2*order-1-k}.

    order: number of vanishing moments (db<order>)
    low_pass: True for the scaling filter h, False for the wavelet filter g

    Returns:
        1D float64 array of length 2*order
    """
    if isinstance(order, bool) or not isinstance(order, int) or order < 1:
        raise InvalidFilterError(f"Filter order must be a positive integer, got {order!r}")

    name = f"db{order}"
    if name not in pywt.wavelist(family="db"):
        raise InvalidFilterError(f"No Daubechies filter of order {order} available")

    wavelet = pywt.Wavelet(name)
    taps = wavelet.rec_lo if low_pass else wavelet.rec_hi
    coeffs = xp.asarray(taps, dtype=xp.float64) / math.sqrt(2.0)
    return coeffs
