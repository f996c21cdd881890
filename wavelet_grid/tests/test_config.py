# tests/test_config.py

import pytest

from wavelet_grid import Channel, ConfigError, GridConfig, load_config


def write_yaml(tmp_path, text):
    path = tmp_path / "grid.yaml"
    path.write_text(text)
    return path


def test_load_config(tmp_path):
    path = write_yaml(tmp_path, "order: 3\ngridsize: 100\nchannel: wavelet\noutput: db3_psi.grid\n")
    config = load_config(path)
    assert config.order == 3
    assert config.gridsize == 100
    assert config.channel is Channel.WAVELET
    assert config.output == "db3_psi.grid"
    assert config.fmt == "%15.10f"
    assert not config.plot


def test_do_wavelet_flag(tmp_path):
    config = load_config(write_yaml(tmp_path, "order: 2\ngridsize: 12\ndo_wavelet: true\n"))
    assert config.channel is Channel.WAVELET


def test_empty_file_uses_defaults(tmp_path):
    config = load_config(write_yaml(tmp_path, ""))
    assert config == GridConfig()


@pytest.mark.parametrize(
    "text",
    [
        "order: 0\n",
        "gridsize: -3\n",
        "order: two\n",
        "channel: mexican_hat\n",
        "method: power\n",
        "spacing: 0.1\n",
        "channel: wavelet\ndo_wavelet: true\n",
        "- order\n- 3\n",
        "order: [1\n",
    ],
)
def test_invalid_configs(tmp_path, text):
    with pytest.raises(ConfigError):
        load_config(write_yaml(tmp_path, text))
