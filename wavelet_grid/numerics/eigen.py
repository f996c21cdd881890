# numerics/eigen.py
import logging

import jax.numpy.linalg as linalg
import numpy as np
import scipy.linalg

from wavelet_grid.core.arrays import xp, to_numpy
from wavelet_grid.errors import ConvergenceError, DegenerateEigenvalueError

logger = logging.getLogger(__name__)

# below this the normalization moment is treated as zero
MOMENT_EPS = 1e-12


def get_eigenvector(M, eigenvalue, rtol=1e-8):
    """
    Eigenvector of M for a known, simple eigenvalue.

    Takes the right singular vector belonging to the smallest singular
    value of M - eigenvalue * I. This is only reliable when exactly one
    singular value is (numerically) zero, so that is checked:
      - smallest singular value <= rtol * scale
      - second smallest singular value > rtol * scale
    with scale = max(largest singular value, 1).

    Returns:
        unit-norm vector, sign arbitrary
    """
    M = xp.asarray(M, dtype=xp.float64)
    N = M.shape[0]
    A = M - eigenvalue * xp.eye(N)

    _, S, Vh = linalg.svd(A, full_matrices=True)
    if not (bool(xp.all(xp.isfinite(S))) and bool(xp.all(xp.isfinite(Vh)))):
        raise ConvergenceError(
            f"SVD of the {N}x{N} transition matrix did not converge (eigenvalue {eigenvalue})"
        )

    # singular values come sorted in descending order
    scale = max(float(S[0]), 1.0)
    smallest = float(S[-1])
    logger.debug("singular values for eigenvalue %g: %s", eigenvalue, to_numpy(S))

    if smallest > rtol * scale:
        raise DegenerateEigenvalueError(
            f"{eigenvalue} is not an eigenvalue of the transition matrix "
            f"(smallest singular value {smallest:.3e})"
        )
    if N > 1:
        second = float(S[-2])
        if second <= rtol * scale:
            raise DegenerateEigenvalueError(
                f"Eigenvalue {eigenvalue} is not isolated "
                f"(two smallest singular values {smallest:.3e}, {second:.3e})"
            )
        logger.debug("isolation gap for eigenvalue %g: %.3e", eigenvalue, second - smallest)

    return Vh[-1, :]


def get_nullspace_vector(M, eigenvalue, rtol=1e-8):
    """
    Same as get_eigenvector, but through scipy's null space solver.
    The null space of M - eigenvalue * I must be one-dimensional.
    """
    A = to_numpy(M).astype(np.float64) - eigenvalue * np.eye(M.shape[0])
    try:
        basis = scipy.linalg.null_space(A, rcond=rtol)
    except (np.linalg.LinAlgError, ValueError) as exc:
        raise ConvergenceError(f"Null space computation failed: {exc}") from exc

    if basis.shape[1] != 1:
        raise DegenerateEigenvalueError(
            f"Null space for eigenvalue {eigenvalue} has dimension {basis.shape[1]}, expected 1"
        )
    return xp.asarray(basis[:, 0])


def calc_integer_values(M, deriv, method="svd", rtol=1e-8):
    """
    Values (deriv=0) or first derivatives (deriv=1) of the refinable function
    at the integers 0..N-1.

    The vector is the eigenvector of M0 for eigenvalue 0.5**deriv, scaled so
    that sum_{i>=1} v[i] * (-i)**deriv = 1. For deriv=0 this is the partition
    of unity, v[0] is zero for Daubechies filters of order >= 2.
    Higher derivatives would need an extra factorial in the moment.
    """
    eigenvalue = 0.5 ** deriv
    if method == "svd":
        values = get_eigenvector(M, eigenvalue, rtol=rtol)
    elif method == "nullspace":
        values = get_nullspace_vector(M, eigenvalue, rtol=rtol)
    else:
        raise ValueError(f"Unknown eigenvector method {method!r}")

    N = values.shape[0]
    moment = xp.sum(values[1:] * (-xp.arange(1, N, dtype=xp.float64)) ** deriv)
    # the moment convention stays as is, only a division by ~0 is refused
    if abs(float(moment)) < MOMENT_EPS:
        raise DegenerateEigenvalueError(
            f"Normalization moment of the derivative-{deriv} eigenvector vanishes ({float(moment):.3e})"
        )

    return values / moment
