"""Input validation for correlation matrices and observation counts."""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..config.const import SYMMETRY_ATOL, SYMMETRY_RTOL
from ..errors import InvalidInputError, NumericInstabilityError

__all__ = ["validate_correlation_matrix", "validate_observation_count"]


def validate_correlation_matrix(
    matrix: ArrayLike,
    atol: float = SYMMETRY_ATOL,
    rtol: float = SYMMETRY_RTOL,
) -> NDArray[np.float64]:
    """Return ``matrix`` as a float64 NumPy array after validation.

    Parameters
    ----------
    matrix:
        Square, symmetric, real array of pairwise correlations.
    atol, rtol:
        Tolerances passed to :func:`numpy.allclose` for the symmetry check.

    Returns
    -------
    numpy.ndarray
        Copy of ``matrix`` converted to ``float64``.  The caller's array is
        never modified.

    Raises
    ------
    InvalidInputError
        If the array is complex, not two dimensional, not square, empty or
        not symmetric within tolerance.
    NumericInstabilityError
        If the array holds NaN or infinite entries.
    """

    raw = np.asarray(matrix)
    if np.iscomplexobj(raw):
        raise InvalidInputError("correlation matrix must be real valued")
    array = np.array(raw, dtype=np.float64, copy=True)

    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise InvalidInputError(
            f"correlation matrix must be square and two dimensional, got shape {array.shape}"
        )
    if array.shape[0] == 0:
        raise InvalidInputError("correlation matrix must have at least one row")
    if not np.all(np.isfinite(array)):
        raise NumericInstabilityError("correlation matrix contains non-finite values")
    if not np.allclose(array, array.T, atol=atol, rtol=rtol):
        raise InvalidInputError("correlation matrix must be symmetric")
    return array


def validate_observation_count(n_obs: object) -> int:
    """Return ``n_obs`` as a Python ``int`` if it is a positive integer."""

    if isinstance(n_obs, (bool, np.bool_)) or not isinstance(n_obs, numbers.Integral):
        raise InvalidInputError(
            f"number of observations must be an integer, got {type(n_obs).__name__}"
        )
    if n_obs < 1:
        raise InvalidInputError(f"number of observations must be positive, got {n_obs}")
    return int(n_obs)
