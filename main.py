# main.py
# Build a Daubechies basis-function grid from a YAML request and
# optionally write and plot it.
#   python main.py [config.yaml]
import logging
import sys

import matplotlib.pyplot as plt

from wavelet_grid import load_config, setup_grid
from wavelet_grid.core.arrays import to_numpy

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("main")

# ----------------
# Setup
# ----------------
config_path = sys.argv[1] if len(sys.argv) > 1 else "config.yaml"
config = load_config(config_path)

# ----------------
# Grid
# ----------------
grid = setup_grid(config.order, config.gridsize, channel=config.channel, method=config.method)
logger.info("%s: %d bins on [%g, %g), dx = %g", grid.name, grid.nbins, grid.grid_min, grid.grid_max, grid.dx)
logger.info("Integral over the support = %.10f", grid.integral())

if config.output:
    grid.write(config.output, fmt=config.fmt)
    logger.info("Grid written to %s", config.output)

# -----------------
# Plot value and derivative
# -----------------
if config.plot:
    x = to_numpy(grid.positions)
    fig, ax = plt.subplots(ncols=2, figsize=(7, 3))
    ax[0].plot(x, to_numpy(grid.values), "-")
    ax[0].set_ylabel(grid.name)
    ax[0].set_xlabel(grid.unit)

    ax[1].plot(x, to_numpy(grid.derivs), "-")
    ax[1].set_ylabel(f"d{grid.name}/d{grid.unit}")
    ax[1].set_xlabel(grid.unit)
    plt.tight_layout()
    plt.show()
