# core/grid.py
from pathlib import Path

from wavelet_grid.core.arrays import xp, to_numpy


class WaveletGrid:
    """
    One-dimensional, uniformly spaced grid over [grid_min, grid_max) with
    nbins bins. Each bin holds one value and, if enabled, one derivative.
    """

    def __init__(self, name, unit, grid_min, grid_max, nbins, periodic=False, derivatives=(True,)):
        self.name = name
        self.unit = unit              # label of the grid coordinate
        self.grid_min = float(grid_min)
        self.grid_max = float(grid_max)
        self.nbins = int(nbins)
        self.periodic = periodic
        self.derivatives = tuple(derivatives)
        if len(self.derivatives) != 1:
            raise ValueError("WaveletGrid is one-dimensional, expected one derivative flag")
        if self.nbins < 1 or self.grid_max <= self.grid_min:
            raise ValueError(f"Invalid grid: [{grid_min}, {grid_max}) with {nbins} bins")

        self.dx = (self.grid_max - self.grid_min) / self.nbins
        self.values = xp.zeros(self.nbins)
        self.derivs = xp.zeros(self.nbins) if self.has_derivatives else None

    @property
    def has_derivatives(self):
        return self.derivatives[0]

    @property
    def positions(self):
        return self.grid_min + self.dx * xp.arange(self.nbins)

    def set_values_and_derivatives(self, indices, values, derivs):
        """Scatter values (and derivatives) into the given bins."""
        indices = xp.asarray(indices)
        self.values = self.values.at[indices].set(values)
        if self.has_derivatives:
            self.derivs = self.derivs.at[indices].set(derivs)

    def integral(self):
        # rectangle rule
        return float(xp.sum(self.values) * self.dx)

    def write(self, out, fmt="%15.10f"):
        """
        Write the grid as text:
            #! FIELDS position db2_phi der_position
            #! SET min_position 0
            ...
        followed by one line per bin.
        out: path or open text file
        """
        if isinstance(out, (str, Path)):
            with open(out, "w") as f:
                self._write(f, fmt)
        else:
            self._write(out, fmt)

    def _write(self, f, fmt):
        fields = [self.unit, self.name]
        if self.has_derivatives:
            fields.append(f"der_{self.unit}")
        f.write("#! FIELDS " + " ".join(fields) + "\n")
        f.write(f"#! SET min_{self.unit} {self.grid_min:g}\n")
        f.write(f"#! SET max_{self.unit} {self.grid_max:g}\n")
        f.write(f"#! SET nbins_{self.unit} {self.nbins}\n")
        f.write(f"#! SET periodic_{self.unit} {'true' if self.periodic else 'false'}\n")

        columns = [to_numpy(self.positions), to_numpy(self.values)]
        if self.has_derivatives:
            columns.append(to_numpy(self.derivs))
        for row in zip(*columns):
            f.write("".join(" " + fmt % x for x in row) + "\n")
