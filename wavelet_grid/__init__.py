"""Daubechies scaling function and wavelet grids built with the cascade algorithm."""

from wavelet_grid.config import GridConfig, load_config
from wavelet_grid.core.builder import setup_grid
from wavelet_grid.core.filters import get_filter_coefficients
from wavelet_grid.core.grid import WaveletGrid
from wavelet_grid.errors import (
    ConfigError,
    ConvergenceError,
    DegenerateEigenvalueError,
    GridCoverageError,
    InvalidFilterError,
    WaveletGridError,
)
from wavelet_grid.numerics.cascade import Channel

__all__ = [
    "setup_grid",
    "Channel",
    "WaveletGrid",
    "GridConfig",
    "load_config",
    "get_filter_coefficients",
    "WaveletGridError",
    "InvalidFilterError",
    "ConvergenceError",
    "DegenerateEigenvalueError",
    "GridCoverageError",
    "ConfigError",
]
