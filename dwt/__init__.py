"""
Discrete Wavelet Transform Module

This package computes the one-dimensional discrete wavelet transform of a
sample buffer in place, forward (decomposition) and inverse (reconstruction),
with periodic boundaries and any number of levels.

Key components:
- Wavelet filter-bank descriptors (Haar, PyWavelets orthogonal families)
- Multi-level in-place transform engine
- Coefficient band layout and plotting helpers

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Scott Friedman and Project Contributors
"""

from .errors import (
    DWTError,
    InvalidLength,
    InvalidWavelet,
    InvalidBuffer
)

from .wavelet import (
    Wavelet,
    WaveletFamily,
    haar,
    from_pywt,
    get_wavelet
)

from .transform import (
    Operation,
    transform,
    forward,
    inverse,
    coefficient_bands
)

from .config import (
    DWTConfig,
    load_config,
    configure_logging
)

# Version information
__version__ = "0.1.0"

__all__ = [
    "DWTError",
    "InvalidLength",
    "InvalidWavelet",
    "InvalidBuffer",
    "Wavelet",
    "WaveletFamily",
    "haar",
    "from_pywt",
    "get_wavelet",
    "Operation",
    "transform",
    "forward",
    "inverse",
    "coefficient_bands",
    "DWTConfig",
    "load_config",
    "configure_logging",
]
