# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Plotting helpers for in-place wavelet decompositions.
"""

import matplotlib.pyplot as plt

from .transform import coefficient_bands


def plot_decomposition(data, level, title=None, show=False):
    """
    Plot the coefficient bands of a forward-transformed buffer.

    Args:
        data (numpy.ndarray): Buffer produced by `forward(data, wavelet, level)`
        level (int): Number of levels used in the forward transform
        title (str): Figure title
        show (bool): Whether to call plt.show()

    Returns:
        matplotlib.figure.Figure: Figure with one subplot per band
    """
    bands = coefficient_bands(data, level)
    labels = [f'Approximation (Level {level})'] + [
        f'Detail (Level {k})' for k in range(level, 0, -1)
    ]

    fig, axes = plt.subplots(len(bands), 1, figsize=(12, 2 * len(bands) + 1), squeeze=False)
    for ax, band, label in zip(axes[:, 0], bands, labels):
        ax.plot(band)
        ax.set_title(label)
        ax.grid(True)

    if title:
        fig.suptitle(title)
    fig.tight_layout()

    if show:
        plt.show()
    return fig
