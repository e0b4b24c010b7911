# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Wavelet filter-bank descriptors.

A Wavelet holds the four filters used by the periodic transform engine:
decomposition low/high-pass and reconstruction low/high-pass, each with
exactly `length` taps, plus a phase `offset` applied to the circular
convolution. Descriptors are immutable and can be shared freely between
calls and threads.

The Haar wavelet is built directly. Other orthogonal families (Daubechies,
Symlets, Coiflets) are taken from PyWavelets.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
import pywt

from .errors import InvalidWavelet
from .numeric import frac_1_sqrt_2, resolve_dtype

logger = logging.getLogger(__name__)


class WaveletFamily(Enum):
    """Enum defining the supported orthogonal wavelet families."""
    HAAR = "haar"
    DAUBECHIES = "db"
    SYMLET = "sym"
    COIFLET = "coif"


@dataclass(frozen=True, eq=False)
class Wavelet:
    """
    Immutable filter-bank descriptor.

    Attributes:
        length (int): Number of filter taps
        offset (int): Phase offset of the circular convolution, 0 <= offset < length
        dec_lo (numpy.ndarray): Decomposition low-pass filter
        dec_hi (numpy.ndarray): Decomposition high-pass filter
        rec_lo (numpy.ndarray): Reconstruction low-pass filter
        rec_hi (numpy.ndarray): Reconstruction high-pass filter
        name (str): Display name

    Raises:
        InvalidWavelet: If the filters do not all have `length` finite taps or
            the offset is out of range
    """
    length: int
    offset: int
    dec_lo: np.ndarray
    dec_hi: np.ndarray
    rec_lo: np.ndarray
    rec_hi: np.ndarray
    name: str = field(default="custom")

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, (int, np.integer)):
            raise InvalidWavelet(f"length must be an integer, got {self.length!r}")
        if isinstance(self.offset, bool) or not isinstance(self.offset, (int, np.integer)):
            raise InvalidWavelet(f"offset must be an integer, got {self.offset!r}")
        if self.length < 1:
            raise InvalidWavelet(f"length must be positive, got {self.length}")
        if not 0 <= self.offset < self.length:
            raise InvalidWavelet(
                f"offset must lie in [0, {self.length}), got {self.offset}")

        names = ("dec_lo", "dec_hi", "rec_lo", "rec_hi")
        filters = []
        for name in names:
            try:
                coeffs = np.asarray(getattr(self, name))
            except (ValueError, TypeError) as e:
                raise InvalidWavelet(f"{name} is not a flat sequence of numbers") from e
            if np.iscomplexobj(coeffs) or not np.issubdtype(coeffs.dtype, np.number):
                raise InvalidWavelet(f"{name} must hold real numbers, got dtype {coeffs.dtype}")
            filters.append(coeffs)
        dtype = np.result_type(*filters)
        if not np.issubdtype(dtype, np.floating):
            dtype = resolve_dtype(None)

        for name, coeffs in zip(names, filters):
            if coeffs.ndim != 1 or coeffs.shape[0] != self.length:
                raise InvalidWavelet(
                    f"{name} must have exactly {self.length} taps, got shape {coeffs.shape}")
            coeffs = np.array(coeffs, dtype=dtype)
            if not np.all(np.isfinite(coeffs)):
                raise InvalidWavelet(f"{name} contains non-finite coefficients")
            coeffs.flags.writeable = False
            object.__setattr__(self, name, coeffs)

        object.__setattr__(self, "length", int(self.length))
        object.__setattr__(self, "offset", int(self.offset))

    @property
    def dtype(self):
        """numpy.dtype: Element type of the coefficients."""
        return self.dec_lo.dtype

    def astype(self, dtype):
        """
        Return the same filter bank with coefficients cast to another width.

        Args:
            dtype: Target floating dtype

        Returns:
            Wavelet: A new descriptor, or self if the dtype already matches
        """
        dtype = resolve_dtype(dtype)
        if dtype == self.dtype:
            return self
        return Wavelet(
            length=self.length,
            offset=self.offset,
            dec_lo=self.dec_lo.astype(dtype),
            dec_hi=self.dec_hi.astype(dtype),
            rec_lo=self.rec_lo.astype(dtype),
            rec_hi=self.rec_hi.astype(dtype),
            name=self.name,
        )


def is_orthonormal(low, high, tol=1e-10):
    """
    Check that a low/high-pass pair forms an orthonormal two-channel filter bank.

    Both filters must have unit energy and be orthogonal to their own even
    shifts, and every even shift of one must be orthogonal to the other.

    Args:
        low (array_like): Low-pass filter
        high (array_like): High-pass filter
        tol (float): Absolute tolerance on each inner product

    Returns:
        bool: True if all conditions hold within tol
    """
    low = np.asarray(low, dtype=np.float64)
    high = np.asarray(high, dtype=np.float64)
    if low.shape != high.shape or low.ndim != 1:
        return False

    length = low.shape[0]
    lags = np.arange(1 - length, length)
    even = lags % 2 == 0
    delta = (lags == 0).astype(np.float64)
    pairs = ((low, low, delta), (high, high, delta), (low, high, np.zeros_like(delta)))
    for a, b, expected in pairs:
        corr = np.correlate(a, b, mode="full")
        if not np.allclose(corr[even], expected[even], rtol=0.0, atol=tol):
            return False
    return True


def haar(dtype=None):
    """
    Create the Haar wavelet.

    Args:
        dtype: Floating dtype of the coefficients, defaults to DWT_DEFAULT_DTYPE

    Returns:
        Wavelet: Two-tap descriptor with offset 0
    """
    dtype = resolve_dtype(dtype)
    c = frac_1_sqrt_2(dtype)
    low = np.array([c, c], dtype=dtype)
    high = np.array([c, -c], dtype=dtype)
    return Wavelet(length=2, offset=0, dec_lo=low, dec_hi=high,
                   rec_lo=low, rec_hi=high, name="haar")


def from_pywt(name, dtype=None, centered=False):
    """
    Build a descriptor from an orthogonal PyWavelets filter bank.

    PyWavelets stores its decomposition filters time-reversed for use with
    convolution; the engine correlates, so the reconstruction pair is used
    for both analysis and synthesis. For an orthogonal bank the periodic
    synthesis operator is the transpose of the analysis operator, which is
    also its inverse.

    Args:
        name (str): PyWavelets wavelet name, e.g. "db2" or "sym4"
        dtype: Floating dtype of the coefficients, defaults to DWT_DEFAULT_DTYPE
        centered (bool): Shift the filters by half their length

    Returns:
        Wavelet: The descriptor

    Raises:
        InvalidWavelet: If the name is unknown or the filters are not orthonormal
    """
    dtype = resolve_dtype(dtype)
    try:
        source = pywt.Wavelet(name)
    except ValueError as e:
        raise InvalidWavelet(f"Unknown discrete wavelet {name!r}") from e
    if not source.orthogonal:
        raise InvalidWavelet(f"Wavelet {name!r} is not orthogonal")
    # some banks flagged orthogonal (dmey) are truncated FIR approximations
    if not is_orthonormal(source.rec_lo, source.rec_hi):
        raise InvalidWavelet(f"Filters of {name!r} are not orthonormal")

    low = np.asarray(source.rec_lo, dtype=dtype)
    high = np.asarray(source.rec_hi, dtype=dtype)
    length = len(low)
    offset = length // 2 if centered else 0
    logger.debug("Built %s from PyWavelets: length=%d offset=%d", name, length, offset)
    return Wavelet(length=length, offset=offset, dec_lo=low, dec_hi=high,
                   rec_lo=low, rec_hi=high, name=source.name)


def get_wavelet(family, order=None, dtype=None, centered=False):
    """
    Look up a wavelet by family or name.

    Args:
        family (WaveletFamily or str): Family enum, or a full name such as "db4"
        order (int): Family member (number of vanishing moments), unused for Haar
        dtype: Floating dtype of the coefficients
        centered (bool): Shift the filters by half their length

    Returns:
        Wavelet: The descriptor

    Raises:
        InvalidWavelet: If the family needs an order and none was given, or the
            wavelet does not exist
    """
    if isinstance(family, WaveletFamily):
        if family == WaveletFamily.HAAR:
            name = "haar"
        elif order is None:
            raise InvalidWavelet(f"Wavelet family {family} requires an order")
        else:
            name = f"{family.value}{order}"
    else:
        name = str(family).lower()

    if name == "haar" and not centered:
        return haar(dtype)
    return from_pywt(name, dtype=dtype, centered=centered)
