# numerics/assemble.py
from wavelet_grid.core.arrays import xp
from wavelet_grid.errors import GridCoverageError
from wavelet_grid.numerics.cascade import address_bins


def fill_grid_from_maps(grid, values_map, derivs_map):
    """
    Write the cascade output into grid.

    Every address owns N bins spaced bins_per_int apart (see address_bins).
    All addresses together have to hit each of the grid's bins exactly once,
    otherwise GridCoverageError is raised and the grid is left untouched.
    """
    if set(values_map) != set(derivs_map):
        raise GridCoverageError("Value and derivative maps hold different addresses")

    bins_per_int = len(values_map)
    indices, values, derivs = [], [], []
    for address, value_vec in values_map.items():
        deriv_vec = derivs_map[address]
        if value_vec.shape != deriv_vec.shape:
            raise GridCoverageError(
                f"Address {address}: {value_vec.shape[0]} values but {deriv_vec.shape[0]} derivatives"
            )
        indices.append(address_bins(address, bins_per_int, value_vec.shape[0]))
        values.append(value_vec)
        derivs.append(deriv_vec)

    indices = xp.concatenate(indices)
    if indices.shape[0] != grid.nbins:
        raise GridCoverageError(
            f"Cascade produced {indices.shape[0]} samples for a grid of {grid.nbins} bins"
        )
    if int(xp.min(indices)) < 0 or int(xp.max(indices)) >= grid.nbins:
        raise GridCoverageError("Cascade sample falls outside the grid")

    hits = xp.zeros(grid.nbins, dtype=xp.int64).at[indices].add(1)
    if not bool(xp.all(hits == 1)):
        unset = int(xp.sum(hits == 0))
        twice = int(xp.sum(hits > 1))
        raise GridCoverageError(f"{unset} bins left unset, {twice} bins written more than once")

    grid.set_values_and_derivatives(indices, xp.concatenate(values), xp.concatenate(derivs))
    return grid
