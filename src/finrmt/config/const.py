"""Core constants used across :mod:`finrmt`.

Every value here is a default; the public functions accept keyword arguments
that override them for a single call.
"""
#
from __future__ import annotations
#
__all__ = [
    "SYMMETRY_ATOL",
    "SYMMETRY_RTOL",
    "DIAGONAL_VALUE",
    "MARKET_MODE_VALUE",
]
#
#: Absolute tolerance used when checking that the input matrix is symmetric.
SYMMETRY_ATOL: float = 1e-8
#: Relative tolerance used when checking that the input matrix is symmetric.
SYMMETRY_RTOL: float = 1e-5
#
#: Value written on every diagonal entry of the filtered matrix.
DIAGONAL_VALUE: float = 1.0
#: Value that replaces the largest (market) eigenvalue in the rebuilt spectrum.
MARKET_MODE_VALUE: float = 0.0
