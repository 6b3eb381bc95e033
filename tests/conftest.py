"""
Shared pytest fixtures.

The two reference bases are built once per session with the default
100 000-panel composite rule, so accuracy assertions match what the
`orthopoly demo` command prints.
"""

import numpy as np
import pytest

from orthopoly.bases import GramSchmidtBuilder
from orthopoly.inner_products import ChebyshevInnerProduct, LegendreInnerProduct


@pytest.fixture
def sample_points():
    """Points used for pointwise polynomial checks (includes 0 and negatives)."""
    return np.array([-2.0, -1.0, 0.0, 1.0, 2.0, 3.5])


@pytest.fixture(scope="session")
def legendre_dot():
    return LegendreInnerProduct(order=5)


@pytest.fixture(scope="session")
def chebyshev_dot():
    return ChebyshevInnerProduct(order=5)


@pytest.fixture(scope="session")
def legendre_basis(legendre_dot):
    return GramSchmidtBuilder(legendre_dot).build(5)


@pytest.fixture(scope="session")
def chebyshev_basis(chebyshev_dot):
    return GramSchmidtBuilder(chebyshev_dot).build(5)
