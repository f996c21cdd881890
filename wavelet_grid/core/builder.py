# core/builder.py
import logging

from wavelet_grid.core.arrays import get_device_info
from wavelet_grid.core.filters import get_filter_coefficients
from wavelet_grid.core.grid import WaveletGrid
from wavelet_grid.errors import InvalidFilterError
from wavelet_grid.numerics.assemble import fill_grid_from_maps
from wavelet_grid.numerics.cascade import Channel, cascade, recursion_depth
from wavelet_grid.numerics.eigen import calc_integer_values
from wavelet_grid.numerics.transition import setup_matrices

logger = logging.getLogger(__name__)


def setup_grid(order, gridsize, channel=Channel.SCALING, method="svd"):
    """
    Sample the Daubechies scaling function (or wavelet) of the given order
    and its first derivative on [0, 2*order - 1).

    order: Daubechies order (db<order>)
    gridsize: requested number of bins, rounded up to (2*order - 1) * 2**r
    channel: Channel, "scaling"/"wavelet" or the do_wavelet flag
    method: "svd" or "nullspace" for the integer-lattice eigenvectors

    Returns:
        populated WaveletGrid named db<order>_phi or db<order>_psi
    """
    channel = Channel.coerce(channel)
    if isinstance(gridsize, bool) or not isinstance(gridsize, int) or gridsize < 1:
        raise InvalidFilterError(f"Requested gridsize must be a positive integer, got {gridsize!r}")

    h_coeffs = get_filter_coefficients(order, low_pass=True)
    # the range of the grid is from 0 to maxsupport
    maxsupport = 2 * order - 1

    depth = recursion_depth(maxsupport, gridsize)
    bins_per_int = 1 << depth
    gridsize = maxsupport * bins_per_int
    logger.info(
        "Setting up db%d %s grid: support %d, recursion depth %d, %d bins",
        order, channel.value, maxsupport, depth, gridsize,
    )
    logger.debug("array backend: %s", get_device_info())

    h_mats = setup_matrices(h_coeffs, order)
    g_mats = None
    if channel is Channel.WAVELET:
        g_mats = setup_matrices(get_filter_coefficients(order, low_pass=False), order)

    values_at_integers = calc_integer_values(h_mats.m0, 0, method=method)
    derivs_at_integers = calc_integer_values(h_mats.m0, 1, method=method)

    values = cascade(h_mats, g_mats, values_at_integers, depth, deriv=0, channel=channel)
    derivs = cascade(h_mats, g_mats, derivs_at_integers, depth, deriv=1, channel=channel)

    grid = WaveletGrid(
        f"db{order}_{channel.symbol}", "position", "0", str(maxsupport), gridsize,
        periodic=False, derivatives=(True,),
    )
    fill_grid_from_maps(grid, values, derivs)
    return grid
