"""Split a sorted eigenspectrum into noise, group and market bands."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .bounds import BulkEdges

__all__ = [
    "SpectralPartition",
    "find_noise_boundary",
    "find_lower_boundary",
    "partition_spectrum",
]


@dataclass(frozen=True)
class SpectralPartition:
    """Band boundaries of an ascending spectrum of length ``n``.

    Attributes
    ----------
    max_index : int
        Position of the first eigenvalue strictly above the upper bulk edge,
        or ``n - 1`` when there is none.
    min_index : int
        Position of the last eigenvalue strictly below the lower bulk edge,
        or ``0`` when there is none.  Kept for diagnostics only.
    n : int
        Length of the spectrum.
    degenerate : bool
        ``True`` when no eigenvalue exceeds the upper edge, i.e. the whole
        spectrum is classified as noise.
    """

    max_index: int
    min_index: int
    n: int
    degenerate: bool = False

    @property
    def market_index(self) -> int:
        return self.n - 1

    @property
    def noise_slice(self) -> slice:
        """Positions replaced by the noise-floor average."""
        return slice(0, self.max_index)

    @property
    def group_slice(self) -> slice:
        """Positions whose eigenvalues are kept unchanged."""
        return slice(self.max_index, self.market_index)

    @property
    def n_noise(self) -> int:
        return self.max_index

    @property
    def n_group(self) -> int:
        return max(self.market_index - self.max_index, 0)

    @property
    def is_degenerate(self) -> bool:
        return self.degenerate


def find_noise_boundary(eigvals: NDArray, lambda_max: float) -> int:
    """Return the first position with ``eigvals > lambda_max``.

    Eigenvalues equal to the edge count as noise.  When no eigenvalue lies
    above the edge the last position ``len(eigvals) - 1`` is returned.
    """
    above = np.flatnonzero(eigvals > lambda_max)
    if above.size == 0:
        return len(eigvals) - 1
    return int(above[0])


def find_lower_boundary(eigvals: NDArray, lambda_min: float) -> int:
    """Return the last position with ``eigvals < lambda_min``, or ``0``."""
    below = np.flatnonzero(eigvals < lambda_min)
    if below.size == 0:
        return 0
    return int(below[-1])


def partition_spectrum(eigvals: NDArray, edges: BulkEdges) -> SpectralPartition:
    """Locate the band boundaries of an ascending spectrum."""
    n = len(eigvals)
    return SpectralPartition(
        max_index=find_noise_boundary(eigvals, edges.lambda_max),
        min_index=find_lower_boundary(eigvals, edges.lambda_min),
        n=n,
        degenerate=not bool(np.any(eigvals > edges.lambda_max)),
    )
