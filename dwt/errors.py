# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Exception types raised by the wavelet transform package.
"""


class DWTError(Exception):
    """Base class for all transform errors."""


class InvalidLength(DWTError, ValueError):
    """
    The buffer length is not compatible with the requested level.

    Attributes:
        length (int): Length of the offending buffer
        level (int): Requested number of levels
    """

    def __init__(self, length, level, message=None):
        self.length = length
        self.level = level
        if message is None:
            message = f"Buffer length {length} is not divisible by 2^{level}"
        super().__init__(message)


class InvalidWavelet(DWTError, ValueError):
    """The wavelet descriptor is malformed or cannot be constructed."""


class InvalidBuffer(DWTError, TypeError):
    """The sample buffer cannot be transformed in place."""
