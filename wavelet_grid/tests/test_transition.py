# tests/test_transition.py

import math

import numpy as np
import pytest

from wavelet_grid.core.arrays import to_numpy, xp
from wavelet_grid.core.filters import get_filter_coefficients
from wavelet_grid.errors import InvalidFilterError
from wavelet_grid.numerics.transition import setup_matrices, validate_filter


@pytest.mark.parametrize("order", [2, 3, 4, 6])
def test_matrix_dimension(order):
    mats = setup_matrices(get_filter_coefficients(order), order)
    assert mats.m0.shape == (2 * order - 1, 2 * order - 1)
    assert mats.m1.shape == (2 * order - 1, 2 * order - 1)
    assert mats.size == 2 * order - 1


@pytest.mark.parametrize("order", [2, 3, 5])
def test_matrices_follow_index_bands(order):
    h = to_numpy(get_filter_coefficients(order))
    mats = setup_matrices(h, order)
    M0, M1 = to_numpy(mats.m0), to_numpy(mats.m1)
    N = 2 * order - 1

    for i in range(N):
        for j in range(N):
            shift = 2 * i - j
            if 0 <= shift <= N:
                assert M0[i, j] == 2 * h[shift]
            else:
                assert M0[i, j] == 0.0
            if -1 <= shift <= N - 1:
                assert M1[i, j] == 2 * h[shift + 1]
            else:
                assert M1[i, j] == 0.0


def test_filter_normalization():
    h = to_numpy(get_filter_coefficients(3))
    g = to_numpy(get_filter_coefficients(3, low_pass=False))
    assert abs(h.sum() - 1.0) < 1e-12
    assert abs(g.sum()) < 1e-12
    # orthonormal taps before the 1/sqrt(2) scaling
    assert abs((h ** 2).sum() - 0.5) < 1e-12


def test_db2_taps():
    h = to_numpy(get_filter_coefficients(2))
    s3 = math.sqrt(3.0)
    expected = np.array([1 + s3, 3 + s3, 3 - s3, 1 - s3]) / 8.0
    np.testing.assert_allclose(h, expected, atol=1e-12)


def test_pair_indexing_and_scaling():
    mats = setup_matrices(get_filter_coefficients(2), 2)
    assert mats[0] is mats.m0
    assert mats[1] is mats.m1
    with pytest.raises(IndexError):
        mats[2]

    doubled = mats.scaled(2.0)
    np.testing.assert_array_equal(to_numpy(doubled.m0), 2.0 * to_numpy(mats.m0))
    # input pair is untouched
    np.testing.assert_array_equal(to_numpy(mats.m1), to_numpy(setup_matrices(get_filter_coefficients(2)).m1))


def test_wrong_filter_length():
    with pytest.raises(InvalidFilterError):
        setup_matrices(get_filter_coefficients(2), order=3)


@pytest.mark.parametrize("coeffs", [[0.5], [0.2, 0.3, 0.5], [[0.5, 0.5]], [0.5, float("nan")]])
def test_malformed_filters(coeffs):
    with pytest.raises(InvalidFilterError):
        validate_filter(xp.asarray(coeffs))


@pytest.mark.parametrize("order", [0, -1, 2.0, True, 1000])
def test_unsupported_orders(order):
    with pytest.raises(InvalidFilterError):
        get_filter_coefficients(order)
