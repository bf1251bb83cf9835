"""Random Matrix Theory filtering of financial correlation matrices.

This module splits an empirical correlation matrix into three components,
following Kim & Jeong, "Systematic analysis of group identification in stock
markets" (2005):

1. a random component, whose eigenvalues lie inside the bias-corrected
   Marchenko-Pastur bulk,
2. a group component, the eigenvalues above the bulk except the largest,
3. a market component, the single largest eigenvalue.

The filtered matrix keeps only the group component, with the noise band
flattened to its average eigenvalue, and is suitable as the modularity matrix
of a community-detection algorithm such as the Louvain method.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Union

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from .config.const import DIAGONAL_VALUE, MARKET_MODE_VALUE, SYMMETRY_ATOL, SYMMETRY_RTOL
from .errors import NumericInstabilityError
from .utils.spectral import (
    BulkEdges,
    SpectralPartition,
    marchenko_pastur_edges,
    noise_floor_average,
    normalize_diagonal,
    partition_spectrum,
    rebuild_spectrum,
    reconstruct_matrix,
    sorted_eigh,
)
from .utils.validation import validate_correlation_matrix, validate_observation_count

__all__ = ["FilteredCorrResult", "filter_correlation_matrix_full", "fin_rmt"]


@dataclass
class FilteredCorrResult:
    """Result from the RMT filtering workflow.

    Attributes
    ----------
    filtered_matrix : np.ndarray or pd.DataFrame
        Group-component correlation matrix (N x N) with unit diagonal.  A
        DataFrame with the input labels when the input was a DataFrame.
    original_matrix : np.ndarray
        Validated float64 copy of the input correlation matrix (N x N)
    eigenvalues : np.ndarray
        Eigenvalues of the original matrix, ascending
    eigenvectors : np.ndarray
        Eigenvectors of the original matrix, columns paired with eigenvalues
    rebuilt_eigenvalues : np.ndarray
        Diagonal of the rebuilt eigenvalue matrix used for reconstruction
    edges : BulkEdges
        Bias-corrected Marchenko-Pastur edges
    partition : SpectralPartition
        Noise / group / market band boundaries
    noise_average : float
        Average eigenvalue assigned to the noise band
    n_obs : int
        Number of observations the correlation matrix was estimated from
    """

    filtered_matrix: Union[np.ndarray, pd.DataFrame]
    original_matrix: np.ndarray
    eigenvalues: np.ndarray
    eigenvectors: np.ndarray
    rebuilt_eigenvalues: np.ndarray
    edges: BulkEdges
    partition: SpectralPartition
    noise_average: float
    n_obs: int

    @property
    def n_series(self) -> int:
        return self.original_matrix.shape[0]

    @property
    def group_eigenvalues(self) -> np.ndarray:
        return self.eigenvalues[self.partition.group_slice]

    @property
    def market_eigenvalue(self) -> float:
        return float(self.eigenvalues[-1])

    @property
    def n_group_components(self) -> int:
        return self.partition.n_group

    @property
    def is_degenerate(self) -> bool:
        return self.partition.is_degenerate


def filter_correlation_matrix_full(
    corr: Union[ArrayLike, pd.DataFrame],
    n_obs: int,
    *,
    atol: float = SYMMETRY_ATOL,
    rtol: float = SYMMETRY_RTOL,
    market_value: float = MARKET_MODE_VALUE,
    diagonal_value: float = DIAGONAL_VALUE,
) -> FilteredCorrResult:
    """Filter a correlation matrix and return every intermediate quantity.

    Parameters
    ----------
    corr : array_like or pd.DataFrame, shape (N, N)
        Symmetric correlation matrix with unit diagonal.  Not modified.
    n_obs : int
        Number of time points used to estimate ``corr``.  Values at or below
        ``N`` are accepted but make the noise model unreliable.
    atol, rtol : float, optional
        Tolerances of the symmetry check.
    market_value : float, optional
        Replacement for the market eigenvalue (default 0, full removal).
    diagonal_value : float, optional
        Value written on the diagonal of the filtered matrix (default 1).

    Returns
    -------
    FilteredCorrResult
        Filtered matrix together with spectrum, edges and partition.

    Raises
    ------
    InvalidInputError
        If ``corr`` is not a real square symmetric matrix or ``n_obs`` is not
        a positive integer.
    NumericInstabilityError
        If ``corr`` holds non-finite values, the eigensolver fails, or the
        filtered matrix is not finite.
    """
    labels: Optional[pd.Index] = corr.columns if isinstance(corr, pd.DataFrame) else None
    index: Optional[pd.Index] = corr.index if isinstance(corr, pd.DataFrame) else None

    C = validate_correlation_matrix(corr, atol=atol, rtol=rtol)
    T = validate_observation_count(n_obs)
    N = C.shape[0]

    if T <= N:
        logging.warning(
            "Only %d observations for %d series (Q=%.3f); noise edges are unreliable",
            T,
            N,
            T / N,
        )

    # Step 1: sorted eigendecomposition
    eigvals, eigvecs = sorted_eigh(C)

    # Step 2: bulk edges
    edges = marchenko_pastur_edges(eigvals, N, T)
    logging.debug(
        "Q=%.4f sigma=%.4f edges=[%.6g, %.6g]",
        edges.q,
        edges.sigma,
        edges.lambda_min,
        edges.lambda_max,
    )

    # Step 3: noise / group / market bands
    partition = partition_spectrum(eigvals, edges)
    if partition.is_degenerate:
        logging.info(
            "All %d eigenvalues lie at or below lambda_max=%.6g; no group structure detected",
            N,
            edges.lambda_max,
        )
    logging.debug(
        "Partition: max_index=%d min_index=%d (%d noise, %d group)",
        partition.max_index,
        partition.min_index,
        partition.n_noise,
        partition.n_group,
    )

    # Step 4: rebuilt spectrum
    noise_average = noise_floor_average(eigvals, partition.max_index)
    diag = rebuild_spectrum(eigvals, partition.max_index, market_value=market_value)

    # Step 5: reconstruction and unit diagonal
    M = normalize_diagonal(reconstruct_matrix(eigvecs, diag), value=diagonal_value)
    if not np.all(np.isfinite(M)):
        raise NumericInstabilityError("filtered correlation matrix contains non-finite values")

    filtered: Union[np.ndarray, pd.DataFrame] = M
    if labels is not None:
        filtered = pd.DataFrame(M, index=index, columns=labels)

    return FilteredCorrResult(
        filtered_matrix=filtered,
        original_matrix=C,
        eigenvalues=eigvals,
        eigenvectors=eigvecs,
        rebuilt_eigenvalues=diag,
        edges=edges,
        partition=partition,
        noise_average=noise_average,
        n_obs=T,
    )


def fin_rmt(
    corr: Union[ArrayLike, pd.DataFrame],
    n_obs: int,
    *,
    atol: float = SYMMETRY_ATOL,
    rtol: float = SYMMETRY_RTOL,
    market_value: float = MARKET_MODE_VALUE,
    diagonal_value: float = DIAGONAL_VALUE,
) -> Union[NDArray, pd.DataFrame]:
    """Return the RMT-filtered correlation matrix of ``corr``.

    Thin wrapper around :func:`filter_correlation_matrix_full` returning
    only the filtered matrix.  The output is symmetric with an exact unit
    diagonal; off-diagonal entries may fall outside ``[-1, 1]``.

    Examples
    --------
    >>> import numpy as np
    >>> fin_rmt(np.eye(2), 100)
    array([[1., 0.],
           [0., 1.]])
    """
    return filter_correlation_matrix_full(
        corr,
        n_obs,
        atol=atol,
        rtol=rtol,
        market_value=market_value,
        diagonal_value=diagonal_value,
    ).filtered_matrix
