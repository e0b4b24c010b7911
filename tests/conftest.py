# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Global pytest configuration.
"""

import os
import sys

import numpy as np
import pytest

# Add the project root to the Python path so tests can import modules properly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dwt import haar, from_pywt


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def random_signal(rng):
    """Random float64 signal of length 256."""
    return rng.standard_normal(256)


@pytest.fixture(params=["haar", "db2", "db4", "sym4", "coif1"])
def orthogonal_wavelet(request):
    """Each supported family, uncentered."""
    if request.param == "haar":
        return haar()
    return from_pywt(request.param)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove package environment variables for the duration of a test."""
    monkeypatch.delenv("DWT_DEFAULT_DTYPE", raising=False)
    monkeypatch.delenv("DWT_LOG_LEVEL", raising=False)
    return monkeypatch
