# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
In-place multi-level discrete wavelet transform with periodic boundaries.

A forward pass on a buffer of length N convolves the active prefix circularly
with the analysis filters, decimates by two, and stores the approximation
coefficients in the first half of the prefix and the detail coefficients in
the second half. The next level repeats this on the first half only, so after
`level` passes the buffer reads

    [A_L | D_L | D_{L-1} | ... | D_1]

where A_L and D_L have N / 2^L entries and D_k has N / 2^k entries. The
inverse pass walks the same prefixes from the smallest up to N.

Example:
    >>> import numpy as np
    >>> from dwt import forward, inverse, haar
    >>> data = np.array([4.0, 4.0, 4.0, 4.0])
    >>> forward(data, haar(), 1)
    >>> data
    array([5.65685425, 5.65685425, 0.        , 0.        ])
"""

import logging
from enum import Enum
from numbers import Integral

import numpy as np

from .errors import InvalidBuffer, InvalidLength, InvalidWavelet
from .wavelet import Wavelet

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Direction of the transform."""
    FORWARD = "forward"
    INVERSE = "inverse"


def validate_level(level):
    """
    Check that a level is a non-negative integer.

    Raises:
        InvalidLength: If the level is negative or not an integer
    """
    if isinstance(level, bool) or not isinstance(level, Integral):
        raise InvalidLength(None, level, f"level must be an integer, got {level!r}")
    if level < 0:
        raise InvalidLength(None, level, f"level must be non-negative, got {level}")


def validate_length(n, level):
    """
    Check that a buffer of length n can be transformed `level` times.

    Raises:
        InvalidLength: If level > 0 and n is not divisible by 2^level
    """
    validate_level(level)
    if level == 0 or n == 0:
        return
    # 2^level > n for any level past the bit length, checked before shifting
    if level >= n.bit_length() or n % (1 << int(level)) != 0:
        raise InvalidLength(n, level)


def validate_buffer(data):
    """
    Check that data is a writable one-dimensional floating array.

    Raises:
        InvalidBuffer: If the buffer cannot be transformed in place
    """
    if not isinstance(data, np.ndarray):
        raise InvalidBuffer(f"Expected a numpy.ndarray, got {type(data).__name__}")
    if data.ndim != 1:
        raise InvalidBuffer(f"Expected a one-dimensional buffer, got shape {data.shape}")
    if not np.issubdtype(data.dtype, np.floating):
        raise InvalidBuffer(f"Expected a floating buffer, got dtype {data.dtype}")
    if not data.flags.writeable:
        raise InvalidBuffer("Buffer is read-only")


def zero_prefix(buffer, n):
    """Set buffer[:n] to zero."""
    buffer[:n] = 0


def copy_prefix(source, destination, n):
    """Copy source[:n] into destination[:n]."""
    destination[:n] = source[:n]


def forward_step(data, wavelet, n, work):
    """
    Apply one analysis level to data[:n].

    Args:
        data (numpy.ndarray): Sample buffer, modified in place
        wavelet (Wavelet): Filter bank
        n (int): Active length, even and at most len(data)
        work (numpy.ndarray): Scratch buffer of at least n entries
    """
    zero_prefix(work, n)
    # length * n >= offset, so every index below stays non-negative before the modulo
    nm = wavelet.length * n - wavelet.offset
    nh = n >> 1
    base = 2 * np.arange(nh) + nm

    h = np.zeros(nh, dtype=work.dtype)
    g = np.zeros(nh, dtype=work.dtype)
    for j in range(wavelet.length):
        samples = data[(base + j) % n]
        h += wavelet.dec_lo[j] * samples
        g += wavelet.dec_hi[j] * samples

    work[:nh] += h
    work[nh:n] += g
    copy_prefix(work, data, n)


def inverse_step(data, wavelet, n, work):
    """
    Apply one synthesis level to data[:n].

    Approximation coefficients are read from data[:n/2] and detail
    coefficients from data[n/2:n].

    Args:
        data (numpy.ndarray): Coefficient buffer, modified in place
        wavelet (Wavelet): Filter bank
        n (int): Active length, even and at most len(data)
        work (numpy.ndarray): Scratch buffer of at least n entries
    """
    zero_prefix(work, n)
    nm = wavelet.length * n - wavelet.offset
    nh = n >> 1
    base = 2 * np.arange(nh) + nm

    h = data[:nh]
    g = data[nh:n]
    for j in range(wavelet.length):
        # unbuffered so that wrapped taps landing on the same index all count
        np.add.at(work, (base + j) % n, wavelet.rec_lo[j] * h + wavelet.rec_hi[j] * g)

    copy_prefix(work, data, n)


def transform(data, operation, wavelet, level):
    """
    Perform the transform in place.

    The length of `data` must be divisible by 2^level. For a forward
    transform the data are replaced by approximation and detail
    coefficients; for an inverse transform they are assumed to be laid out
    that way and are replaced by the reconstructed samples.

    Args:
        data (numpy.ndarray): One-dimensional floating buffer, modified in place
        operation (Operation): FORWARD or INVERSE
        wavelet (Wavelet): Filter bank
        level (int): Number of levels, 0 leaves the data unchanged

    Raises:
        InvalidLength: If level is invalid or the length is not divisible by 2^level
        InvalidBuffer: If data is not a writable 1-D floating array
        InvalidWavelet: If wavelet is not a Wavelet
        ValueError: If the operation is unknown
    """
    validate_level(level)
    if not isinstance(operation, Operation):
        raise ValueError(f"Unknown operation {operation!r}")
    if level == 0:
        return

    if not isinstance(wavelet, Wavelet):
        raise InvalidWavelet(f"Expected a Wavelet, got {type(wavelet).__name__}")
    validate_buffer(data)
    n = data.shape[0]
    validate_length(n, level)
    if n == 0:
        return

    wavelet = wavelet.astype(data.dtype)
    work = np.zeros(n, dtype=data.dtype)
    logger.debug("%s %s transform: length=%d level=%d",
                 operation.value, wavelet.name, n, level)

    if operation == Operation.FORWARD:
        for i in range(level):
            forward_step(data, wavelet, n >> i, work)
    else:
        for i in range(level):
            inverse_step(data, wavelet, n >> (level - i - 1), work)


def forward(data, wavelet, level):
    """Forward transform in place. See `transform`."""
    transform(data, Operation.FORWARD, wavelet, level)


def inverse(data, wavelet, level):
    """Inverse transform in place. See `transform`."""
    transform(data, Operation.INVERSE, wavelet, level)


def coefficient_bands(data, level):
    """
    Split a forward-transformed buffer into its coefficient bands.

    Args:
        data (numpy.ndarray): Buffer produced by `forward(data, wavelet, level)`
        level (int): Number of levels used in the forward transform

    Returns:
        list: Read-only views [A_L, D_L, D_{L-1}, ..., D_1]

    Raises:
        InvalidLength: If the length is not divisible by 2^level
    """
    data = np.asarray(data)
    n = data.shape[0]
    validate_length(n, level)

    bounds = [0] + [n >> k for k in range(level, -1, -1)]
    bands = []
    for start, stop in zip(bounds[:-1], bounds[1:]):
        band = data[start:stop]
        band.flags.writeable = False
        bands.append(band)
    return bands
