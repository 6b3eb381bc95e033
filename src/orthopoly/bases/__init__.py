from orthopoly.bases.base import Basis
from orthopoly.bases.gram_schmidt import (
    OrthonormalBasis,
    GramSchmidtBuilder,
    build_orthonormal_basis,
)
from orthopoly.bases.normalization import rescale_leading, classical_chebyshev, classical_legendre

__all__ = [
    "Basis",
    "OrthonormalBasis",
    "GramSchmidtBuilder",
    "build_orthonormal_basis",
    "rescale_leading",
    "classical_chebyshev",
    "classical_legendre",
]
