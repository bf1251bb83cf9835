"""
Tests for the networkx handoff of filtered matrices.
"""

import networkx as nx
import numpy as np
import pytest

from finrmt import InvalidInputError, build_modularity_network, fin_rmt


class TestModularityNetwork:

    @pytest.mark.integration
    def test_edges_match_filtered_matrix(self, sector_matrix):
        M = fin_rmt(sector_matrix, 1000)
        G = build_modularity_network(M)

        assert G.number_of_nodes() == 12
        assert nx.number_of_selfloops(G) == 0
        assert G.number_of_edges() == 12 * 11 // 2
        assert G[0][1]["weight"] == pytest.approx(M[0, 1])
        assert G[0][5]["weight"] == pytest.approx(M[0, 5])

    @pytest.mark.integration
    def test_labels_from_dataframe(self, labelled_matrix):
        G = build_modularity_network(fin_rmt(labelled_matrix, 1000))
        assert set(G.nodes) == set(labelled_matrix.columns)
        assert G["TCK00"]["TCK01"]["weight"] == pytest.approx(0.25)
        assert G["TCK00"]["TCK04"]["weight"] == pytest.approx(-0.2)

    @pytest.mark.unit
    def test_explicit_labels(self):
        G = build_modularity_network(np.array([[1.0, 0.3], [0.3, 1.0]]), labels=["a", "b"])
        assert G["a"]["b"]["weight"] == pytest.approx(0.3)

    @pytest.mark.unit
    def test_wrong_label_count(self):
        with pytest.raises(InvalidInputError, match="labels"):
            build_modularity_network(np.eye(3), labels=["a", "b"])

    @pytest.mark.unit
    def test_self_loops_kept_on_request(self):
        G = build_modularity_network(np.eye(3), zero_diagonal=False)
        assert nx.number_of_selfloops(G) == 3

    @pytest.mark.unit
    def test_input_not_mutated(self):
        M = np.array([[1.0, -0.4], [-0.4, 1.0]])
        build_modularity_network(M)
        assert M[0, 0] == 1.0
