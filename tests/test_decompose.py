"""
Tests for the sorted symmetric eigendecomposition.
"""

import numpy as np
import pytest

from finrmt import NumericInstabilityError
from finrmt.utils.spectral import decompose
from finrmt.utils.spectral.decompose import sorted_eigh


class TestSortedEigh:

    @pytest.mark.unit
    def test_ascending_order(self, empirical_matrix):
        eigvals, _ = sorted_eigh(empirical_matrix)
        assert np.all(np.diff(eigvals) >= 0)

    @pytest.mark.unit
    def test_pairs_are_consistent(self, sector_matrix):
        eigvals, eigvecs = sorted_eigh(sector_matrix)
        np.testing.assert_allclose(sector_matrix @ eigvecs, eigvecs * eigvals, atol=1e-12)

    @pytest.mark.unit
    def test_orthonormal_basis(self, empirical_matrix):
        _, eigvecs = sorted_eigh(empirical_matrix)
        n = empirical_matrix.shape[0]
        np.testing.assert_allclose(eigvecs.T @ eigvecs, np.eye(n), atol=1e-12)

    @pytest.mark.unit
    def test_reconstructs_input(self, market_matrix):
        eigvals, eigvecs = sorted_eigh(market_matrix)
        np.testing.assert_allclose(eigvecs @ np.diag(eigvals) @ eigvecs.T, market_matrix, atol=1e-12)

    @pytest.mark.unit
    def test_known_spectrum(self, market_matrix):
        eigvals, eigvecs = sorted_eigh(market_matrix)
        np.testing.assert_allclose(eigvals[:-1], 0.5)
        assert eigvals[-1] == pytest.approx(5.5)
        np.testing.assert_allclose(np.abs(eigvecs[:, -1]), 1 / np.sqrt(10))


class TestSolverFailures:

    @pytest.mark.unit
    def test_linalg_error_is_translated(self, monkeypatch):
        def fail(_):
            raise np.linalg.LinAlgError("Eigenvalues did not converge")

        monkeypatch.setattr(decompose.np.linalg, "eigh", fail)
        with pytest.raises(NumericInstabilityError) as excinfo:
            sorted_eigh(np.eye(3))
        assert isinstance(excinfo.value.__cause__, np.linalg.LinAlgError)

    @pytest.mark.unit
    def test_non_finite_output_rejected(self, monkeypatch):
        monkeypatch.setattr(
            decompose.np.linalg,
            "eigh",
            lambda _: (np.array([np.nan, 1.0]), np.eye(2)),
        )
        with pytest.raises(NumericInstabilityError):
            sorted_eigh(np.eye(2))
