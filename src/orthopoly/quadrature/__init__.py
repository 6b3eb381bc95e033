from orthopoly.quadrature.gauss_legendre import (
    GAUSS_LEGENDRE_RULES,
    SUPPORTED_ORDERS,
    gauss_legendre_rule,
    quadrature,
)
from orthopoly.quadrature.composite import DEFAULT_PANEL_COUNT, integrate

__all__ = [
    "GAUSS_LEGENDRE_RULES",
    "SUPPORTED_ORDERS",
    "gauss_legendre_rule",
    "quadrature",
    "DEFAULT_PANEL_COUNT",
    "integrate",
]
