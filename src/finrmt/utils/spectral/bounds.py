"""Marchenko–Pastur bulk edges with an empirical bias correction.

For a correlation matrix of ``N`` uncorrelated series observed at ``T`` time
points, the eigenvalues fall (asymptotically) inside

    lambda_pm = sigma * (1 + 1/Q +- 2 sqrt(1/Q)),    Q = T / N.

With real market data the largest eigenvalue absorbs a sizeable share of the
total variance ``N``; only the remainder is available to the noise bulk, so
the edges are scaled by ``sigma = 1 - lambda_N / N``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ...errors import InvalidInputError

__all__ = ["BulkEdges", "aspect_ratio", "bias_factor", "marchenko_pastur_edges"]


@dataclass(frozen=True)
class BulkEdges:
    """Predicted eigenvalue range of the noise component.

    Attributes
    ----------
    q : float
        Aspect ratio ``T / N``.
    sigma : float
        Bias factor ``1 - max(lambda) / N``.
    lambda_min : float
        Lower bulk edge.
    lambda_max : float
        Upper bulk edge.
    """

    q: float
    sigma: float
    lambda_min: float
    lambda_max: float

    @property
    def width(self) -> float:
        """Half-spread of the bulk, ``2 sigma sqrt(1/Q) = (lambda_max - lambda_min) / 2``."""
        return float(2.0 * self.sigma * np.sqrt(1.0 / self.q))


def aspect_ratio(n: int, t: int) -> float:
    """Return ``Q = t / n`` for ``n`` series observed ``t`` times."""
    if n < 1:
        raise InvalidInputError(f"number of series must be positive, got {n}")
    if t < 1:
        raise InvalidInputError(f"number of observations must be positive, got {t}")
    return t / n


def bias_factor(eigvals: NDArray, n: int) -> float:
    """Fraction of the total variance not explained by the largest mode."""
    return 1.0 - float(np.max(eigvals)) / n


def marchenko_pastur_edges(eigvals: NDArray, n: int, t: int) -> BulkEdges:
    """Compute the bias-corrected Marchenko–Pastur edges.

    Parameters
    ----------
    eigvals : np.ndarray
        Eigenvalues of the empirical correlation matrix.
    n : int
        Number of series (matrix dimension).
    t : int
        Number of observations used to estimate the matrix.

    Returns
    -------
    BulkEdges
        Aspect ratio, bias factor and both edges.  ``Q < 1`` is allowed and
        yields finite edges for every ``t >= 1``.
    """
    q = aspect_ratio(n, t)
    sigma = bias_factor(eigvals, n)
    inv_q = 1.0 / q
    spread = 2.0 * np.sqrt(inv_q)
    return BulkEdges(
        q=q,
        sigma=sigma,
        lambda_min=float(sigma * (1.0 + inv_q - spread)),
        lambda_max=float(sigma * (1.0 + inv_q + spread)),
    )
