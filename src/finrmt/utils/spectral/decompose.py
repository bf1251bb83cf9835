"""Symmetric eigendecomposition with a sorted spectrum."""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ...errors import NumericInstabilityError

__all__ = ["sorted_eigh"]


def sorted_eigh(matrix: NDArray) -> Tuple[NDArray, NDArray]:
    """Eigendecompose a symmetric ``matrix`` with eigenvalues in ascending order.

    Parameters
    ----------
    matrix : np.ndarray, shape (N, N)
        Symmetric real matrix.  Only the lower triangle is read by the solver.

    Returns
    -------
    eigvals : np.ndarray, shape (N,)
        Eigenvalues sorted ascending.
    eigvecs : np.ndarray, shape (N, N)
        Orthonormal eigenvectors; column ``i`` pairs with ``eigvals[i]``.

    Raises
    ------
    NumericInstabilityError
        If the solver does not converge or returns non-finite values.
    """
    try:
        eigvals, eigvecs = np.linalg.eigh(matrix)
    except np.linalg.LinAlgError as exc:
        raise NumericInstabilityError(f"eigendecomposition failed: {exc}") from exc

    # eigh already returns ascending order; a stable sort keeps degenerate
    # eigenvectors in the order the solver produced them
    order = np.argsort(eigvals, kind="stable")
    eigvals = eigvals[order]
    eigvecs = eigvecs[:, order]

    if not (np.all(np.isfinite(eigvals)) and np.all(np.isfinite(eigvecs))):
        raise NumericInstabilityError("eigendecomposition produced non-finite values")

    logging.debug(
        "Eigendecomposed %d x %d matrix: lambda in [%.6g, %.6g]",
        matrix.shape[0],
        matrix.shape[1],
        eigvals[0],
        eigvals[-1],
    )
    return eigvals, eigvecs
