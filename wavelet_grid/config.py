# config.py
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from wavelet_grid.errors import ConfigError
from wavelet_grid.numerics.cascade import Channel


@dataclass
class GridConfig:
    order: int = 4
    gridsize: int = 256
    channel: Channel = Channel.SCALING
    method: str = "svd"         # "svd" or "nullspace"
    output: str = None          # grid file, nothing written if None
    fmt: str = "%15.10f"
    plot: bool = False

    def __post_init__(self):
        for name in ("order", "gridsize"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        try:
            self.channel = Channel.coerce(self.channel)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        if self.method not in ("svd", "nullspace"):
            raise ConfigError(f"method must be 'svd' or 'nullspace', got {self.method!r}")

    @classmethod
    def from_dict(cls, data):
        data = dict(data or {})
        # do_wavelet is the flag spelling of channel
        if "do_wavelet" in data:
            if "channel" in data:
                raise ConfigError("Give either channel or do_wavelet, not both")
            data["channel"] = data.pop("do_wavelet")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path):
    """Read a GridConfig from a YAML file."""
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return GridConfig.from_dict(data)
