# core/arrays.py
import jax
import jax.numpy as jnp
import numpy as np

# Integer-lattice eigenvectors are checked to ~1e-9, float32 is not enough
jax.config.update("jax_enable_x64", True)

Array = jax.Array  # For hint types
xp = jnp  # Drop-in replacement for NumPy API

def get_device_info():
    dev = jax.devices()[0]
    return {
        "device": dev.device_kind,
        "platform": dev.platform,
        "architecture": dev.device_kind,
    }

def to_numpy(array):
    return np.asarray(jax.device_get(array))
