# errors.py
# Exceptions raised while building a wavelet grid. None of them leave a
# partially filled grid behind.


class WaveletGridError(Exception):
    """Base class for all grid construction failures."""


class InvalidFilterError(WaveletGridError, ValueError):
    """Filter taps or order do not describe a usable Daubechies filter."""


class ConvergenceError(WaveletGridError, ArithmeticError):
    """The singular value decomposition did not converge."""


class DegenerateEigenvalueError(WaveletGridError, ArithmeticError):
    """The requested eigenvalue of the transition matrix is not isolated."""


class GridCoverageError(WaveletGridError, RuntimeError):
    """Cascade output does not cover every grid bin exactly once."""


class ConfigError(WaveletGridError, ValueError):
    """Invalid grid request in a configuration file."""
