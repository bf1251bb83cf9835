"""Spectral building blocks of the RMT filter (modularised package)."""

from .bounds import BulkEdges, aspect_ratio, bias_factor, marchenko_pastur_edges
from .decompose import sorted_eigh
from .partition import (
    SpectralPartition,
    find_lower_boundary,
    find_noise_boundary,
    partition_spectrum,
)
from .rebuild import (
    noise_floor_average,
    normalize_diagonal,
    rebuild_spectrum,
    rebuilt_diagonal_matrix,
    reconstruct_matrix,
)

__all__ = [
    "BulkEdges",
    "aspect_ratio",
    "bias_factor",
    "marchenko_pastur_edges",
    "sorted_eigh",
    "SpectralPartition",
    "find_lower_boundary",
    "find_noise_boundary",
    "partition_spectrum",
    "noise_floor_average",
    "normalize_diagonal",
    "rebuild_spectrum",
    "rebuilt_diagonal_matrix",
    "reconstruct_matrix",
]
