from orthopoly.diagnostics.core import (
    gram_matrix,
    orthonormality_error,
    orthonormality_error_from_gram,
    eigen_spectrum,
    condition_number,
    root_residuals,
    chebyshev_roots,
    legendre_known_roots,
)

__all__ = [
    "gram_matrix",
    "orthonormality_error",
    "orthonormality_error_from_gram",
    "eigen_spectrum",
    "condition_number",
    "root_residuals",
    "chebyshev_roots",
    "legendre_known_roots",
]
