"""Rebuild a filtered spectrum and reconstruct the correlation matrix."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ...config.const import DIAGONAL_VALUE, MARKET_MODE_VALUE

__all__ = [
    "noise_floor_average",
    "rebuild_spectrum",
    "rebuilt_diagonal_matrix",
    "reconstruct_matrix",
    "normalize_diagonal",
]


def noise_floor_average(eigvals: NDArray, max_index: int) -> float:
    """Mean of ``eigvals[0..max_index]``, boundary position included."""
    return float(np.mean(eigvals[: max_index + 1]))


def rebuild_spectrum(
    eigvals: NDArray,
    max_index: int,
    market_value: float = MARKET_MODE_VALUE,
) -> NDArray:
    """Return the diagonal of the rebuilt eigenvalue matrix.

    Parameters
    ----------
    eigvals : np.ndarray, shape (N,)
        Eigenvalues sorted ascending.
    max_index : int
        Noise/group boundary as returned by
        :func:`~finrmt.utils.spectral.partition.find_noise_boundary`.
    market_value : float, optional
        Replacement for the largest eigenvalue.  Default 0 removes the market
        mode entirely.

    Returns
    -------
    np.ndarray, shape (N,)
        Positions below ``max_index`` hold the noise-floor average, positions
        ``max_index`` to ``N - 2`` keep their eigenvalue and the last position
        holds ``market_value``.

    Notes
    -----
    The boundary eigenvalue contributes to the noise-floor average and is also
    kept unchanged in the group band.
    """
    n = len(eigvals)
    diag = np.zeros(n, dtype=np.float64)
    diag[:max_index] = noise_floor_average(eigvals, max_index)
    diag[max_index : n - 1] = eigvals[max_index : n - 1]
    diag[n - 1] = market_value
    return diag


def rebuilt_diagonal_matrix(
    eigvals: NDArray,
    max_index: int,
    market_value: float = MARKET_MODE_VALUE,
) -> NDArray:
    """Explicit ``N x N`` form of :func:`rebuild_spectrum`."""
    return np.diag(rebuild_spectrum(eigvals, max_index, market_value=market_value))


def reconstruct_matrix(eigvecs: NDArray, diag: NDArray) -> NDArray:
    """Return ``V @ diag(d) @ V.T``.

    Columns of ``eigvecs`` paired with a zero entry in ``diag`` do not
    contribute to the result.
    """
    return (eigvecs * diag) @ eigvecs.T


def normalize_diagonal(matrix: NDArray, value: float = DIAGONAL_VALUE) -> NDArray:
    """Overwrite the diagonal of ``matrix`` in place and return it."""
    np.fill_diagonal(matrix, value)
    return matrix
