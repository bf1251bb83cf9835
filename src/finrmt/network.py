"""Hand a filtered matrix over to graph-based community detection."""

from __future__ import annotations

from typing import Hashable, Optional, Sequence, Union

import networkx as nx
import numpy as np
import pandas as pd
from numpy.typing import NDArray

from .errors import InvalidInputError
from .utils.validation import validate_correlation_matrix

__all__ = ["build_modularity_network"]


def build_modularity_network(
    matrix: Union[NDArray, pd.DataFrame],
    labels: Optional[Sequence[Hashable]] = None,
    zero_diagonal: bool = True,
) -> nx.Graph:
    """Return a weighted graph whose edge weights are the entries of ``matrix``.

    Parameters
    ----------
    matrix : np.ndarray or pd.DataFrame, shape (N, N)
        Filtered correlation matrix, e.g. the output of
        :func:`~finrmt.workflow_filter.fin_rmt`.
    labels : sequence, optional
        Node names.  Defaults to the DataFrame columns, or ``0..N-1``.
    zero_diagonal : bool, optional
        Drop self-loops (default True).

    Returns
    -------
    nx.Graph
        Undirected graph with a ``weight`` attribute on every non-zero
        off-diagonal entry.  Negative weights are kept.
    """
    if labels is None and isinstance(matrix, pd.DataFrame):
        labels = list(matrix.columns)

    M = validate_correlation_matrix(matrix)
    if zero_diagonal:
        np.fill_diagonal(M, 0)

    G = nx.from_numpy_array(M)
    if labels is not None:
        if len(labels) != M.shape[0]:
            raise InvalidInputError(
                f"expected {M.shape[0]} labels, got {len(labels)}"
            )
        G = nx.relabel_nodes(G, dict(enumerate(labels)))
    return G
