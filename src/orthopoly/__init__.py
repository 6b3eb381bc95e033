"""
orthopoly - orthonormal polynomial bases for weighted inner products.

Polynomials are orthonormalized with modified Gram–Schmidt; inner products
are weighted integrals approximated by composite Gauss–Legendre quadrature.
"""

__version__ = "0.1.0"

from . import bases
from . import diagnostics
from . import inner_products
from . import polynomials
from . import quadrature
from . import utils
from .errors import (
    OrthopolyError,
    UnsupportedQuadratureOrder,
    DegenerateNormalization,
    CoefficientIndexError,
)
from .polynomials import Polynomial
from .quadrature import quadrature as gauss_legendre_quadrature, integrate
from .inner_products import (
    InnerProduct,
    WeightedInnerProduct,
    LegendreInnerProduct,
    ChebyshevInnerProduct,
    JacobiInnerProduct,
)
from .bases import OrthonormalBasis, GramSchmidtBuilder, build_orthonormal_basis

__all__ = [
    # Version info
    "__version__",

    # Main modules
    "bases",
    "diagnostics",
    "inner_products",
    "polynomials",
    "quadrature",
    "utils",

    # Errors
    "OrthopolyError",
    "UnsupportedQuadratureOrder",
    "DegenerateNormalization",
    "CoefficientIndexError",

    # Core API
    "Polynomial",
    "gauss_legendre_quadrature",
    "integrate",
    "InnerProduct",
    "WeightedInnerProduct",
    "LegendreInnerProduct",
    "ChebyshevInnerProduct",
    "JacobiInnerProduct",
    "OrthonormalBasis",
    "GramSchmidtBuilder",
    "build_orthonormal_basis",
]
