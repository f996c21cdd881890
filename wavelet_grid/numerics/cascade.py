# numerics/cascade.py
import enum

from wavelet_grid.core.arrays import xp


class Channel(enum.Enum):
    """Which refinable function a grid holds."""
    SCALING = "scaling"
    WAVELET = "wavelet"

    @classmethod
    def coerce(cls, value):
        """
        Accept a Channel, its name/value ("scaling", "wavelet") or the
        do_wavelet flag (True -> WAVELET).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.WAVELET if value else cls.SCALING
        if isinstance(value, str):
            key = value.strip().lower()
            for channel in cls:
                if key in (channel.value, channel.name.lower()):
                    return channel
        raise ValueError(f"Unknown channel {value!r}, expected 'scaling' or 'wavelet'")

    @property
    def symbol(self):
        return "psi" if self is Channel.WAVELET else "phi"


def recursion_depth(support, gridsize):
    """Smallest r >= 0 with support * 2**r >= gridsize."""
    depth = 0
    while support * (1 << depth) < gridsize:
        depth += 1
    return depth


def address_bins(address, bins_per_int, n):
    """
    Grid bins owned by a binary address.
    The address (e.g. "011") is read as the binary fraction 0.011 of the
    unit interval, component i of its vector sits at i + 0.011.
    """
    decimal = int(address, 2)
    first_grid_element = decimal * (bins_per_int >> len(address))
    return first_grid_element + bins_per_int * xp.arange(n)


def cascade(h_mats, g_mats, values_at_integers, depth, deriv=0, channel=Channel.SCALING):
    """
    Refine integer values down to a spacing of 2**-depth.

    h_mats: low-pass TransitionMatrices
    g_mats: high-pass TransitionMatrices (only used for Channel.WAVELET)
    values_at_integers: function (or derivative) values at the integers
    depth: recursion depth r
    deriv: derivative order of values_at_integers

    Returns:
        dict mapping binary address -> vector of length N, 2**depth entries
    """
    channel = Channel.coerce(channel)
    do_wavelet = channel is Channel.WAVELET
    if do_wavelet and g_mats is None:
        raise ValueError("Wavelet cascade needs the high-pass transition matrices")

    # each derivative picks up a factor 2 from the dilation
    factor = 2.0 ** deriv
    h_mats = h_mats.scaled(factor)
    if do_wavelet:
        g_mats = g_mats.scaled(factor)

    v = xp.asarray(values_at_integers, dtype=xp.float64)
    scaling_map = {"0": v}
    wavelet_map = {}
    if do_wavelet:
        wavelet_map["0"] = g_mats[0] @ v

    if depth > 0:
        scaling_map["1"] = h_mats[1] @ v
        if do_wavelet:
            wavelet_map["1"] = g_mats[1] @ v

    # addresses added on the previous level, "0" is a fixed point of M0
    binary_vec = ["1"]
    for _ in range(1, depth):
        # one level at a time: rows are the coarse vectors of binary_vec
        coarse = xp.stack([scaling_map[binary] for binary in binary_vec])
        new_binary_vec = []
        for k in (0, 1):
            refined = coarse @ h_mats[k].T
            if do_wavelet:
                refined_wavelet = coarse @ g_mats[k].T
            for row, binary in enumerate(binary_vec):
                # prepend the new bit
                new_binary = str(k) + binary
                scaling_map[new_binary] = refined[row]
                if do_wavelet:
                    wavelet_map[new_binary] = refined_wavelet[row]
                new_binary_vec.append(new_binary)
        binary_vec = new_binary_vec

    return wavelet_map if do_wavelet else scaling_map
