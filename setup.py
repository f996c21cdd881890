# setup.py
from setuptools import setup, find_packages

setup(
    name="wavelet-grid",
    version="0.0.1",
    packages=find_packages(include=["wavelet_grid", "wavelet_grid.*"]),
    install_requires=[
        "jax",
        "jaxlib",
        "matplotlib",
        "pyyaml",
        "numpy",
        "scipy",
        "PyWavelets",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description="Daubechies wavelet basis functions sampled on uniform grids",
)
