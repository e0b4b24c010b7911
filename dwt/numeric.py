# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Floating-point capability set used by the transform kernels.

The kernels only need addition, multiplication, negation, an additive
identity and the constant 1/sqrt(2). Every numpy floating dtype provides
these; the helpers below produce the constants in the requested width.
"""

import numpy as np

from .config import default_dtype
from .errors import InvalidBuffer


def resolve_dtype(dtype=None):
    """
    Normalize a dtype argument to a floating numpy dtype.

    Args:
        dtype: Anything numpy accepts as a dtype, or None for the configured default

    Returns:
        numpy.dtype: The floating dtype

    Raises:
        InvalidBuffer: If the dtype is not a floating type
    """
    if dtype is None:
        return default_dtype()
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise InvalidBuffer(f"Unknown dtype {dtype!r}") from e
    if not np.issubdtype(resolved, np.floating):
        raise InvalidBuffer(f"Expected a floating dtype, got {resolved}")
    return resolved


def zero(dtype=None):
    """Return 0.0 in the given dtype."""
    return resolve_dtype(dtype).type(0)


def frac_1_sqrt_2(dtype=None):
    """Return 1/sqrt(2), correctly rounded to the given dtype."""
    dtype = resolve_dtype(dtype)
    # sqrt is correctly rounded and 0.5 is exact in every width
    return np.sqrt(dtype.type(0.5))
