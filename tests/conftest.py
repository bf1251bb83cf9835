"""
Shared pytest fixtures and configuration for finrmt tests.

Provides synthetic correlation matrices with known eigenstructure.
"""

import numpy as np
import pandas as pd
import pytest

from tests.matrix_generators import (
    block_correlation,
    sample_correlation,
    uniform_correlation,
)


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast unit tests")
    config.addinivalue_line("markers", "integration: full filtering pipeline tests")


# ---------------------------------------------------------------------------
# Matrix fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def identity_2():
    return np.eye(2)


@pytest.fixture
def market_matrix():
    """10 series with uniform correlation 0.5: one dominant eigenvalue 5.5."""
    return uniform_correlation(10, 0.5)


@pytest.fixture
def noise_3x3():
    """3x3 uniform correlation 0.2, all-noise when observed only once."""
    return uniform_correlation(3, 0.2)


@pytest.fixture
def sector_matrix():
    """Three sectors of four series sharing a weak market factor."""
    return block_correlation([4, 4, 4], rho_in=0.6, rho_out=0.1)


@pytest.fixture
def empirical_matrix():
    return sample_correlation(n_series=20, n_obs=500, seed=7)


@pytest.fixture
def labelled_matrix(sector_matrix):
    tickers = [f"TCK{i:02d}" for i in range(sector_matrix.shape[0])]
    return pd.DataFrame(sector_matrix, index=tickers, columns=tickers)
