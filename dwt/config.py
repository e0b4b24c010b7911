# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Runtime configuration for the wavelet transform package.

Settings are read from environment variables:

- DWT_DEFAULT_DTYPE: floating dtype used when building wavelets without an
  explicit dtype (default "float64")
- DWT_LOG_LEVEL: logging level name used by configure_logging (default "WARNING")
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Union

import numpy as np

DEFAULT_DTYPE = "float64"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class DWTConfig:
    """Resolved package settings."""
    default_dtype: np.dtype
    log_level: int


def _parse_dtype(value: str) -> np.dtype:
    try:
        dtype = np.dtype(value)
    except TypeError as e:
        raise ValueError(f"DWT_DEFAULT_DTYPE: unknown dtype {value!r}") from e
    if not np.issubdtype(dtype, np.floating):
        raise ValueError(f"DWT_DEFAULT_DTYPE must be a floating dtype, got {dtype}")
    return dtype


def _parse_log_level(value: Union[str, int]) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"DWT_LOG_LEVEL: unknown logging level {value!r}")
    return level


def default_dtype(environ: Optional[Mapping[str, str]] = None) -> np.dtype:
    """Parse DWT_DEFAULT_DTYPE only."""
    if environ is None:
        environ = os.environ
    return _parse_dtype(environ.get("DWT_DEFAULT_DTYPE", DEFAULT_DTYPE))


def log_level(environ: Optional[Mapping[str, str]] = None) -> int:
    """Parse DWT_LOG_LEVEL only."""
    if environ is None:
        environ = os.environ
    return _parse_log_level(environ.get("DWT_LOG_LEVEL", DEFAULT_LOG_LEVEL))


def load_config(environ: Optional[Mapping[str, str]] = None) -> DWTConfig:
    """
    Build the configuration from environment variables.

    Args:
        environ (Mapping): Environment to read, defaults to os.environ

    Returns:
        DWTConfig: Resolved settings

    Raises:
        ValueError: If a variable holds an unusable value
    """
    return DWTConfig(
        default_dtype=default_dtype(environ),
        log_level=log_level(environ),
    )


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Configure root logging for scripts using the package.

    Library modules never install handlers themselves; applications call this
    once at start-up.

    Args:
        level (str or int): Logging level, defaults to DWT_LOG_LEVEL
    """
    if level is None:
        resolved = log_level()
    else:
        resolved = _parse_log_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
