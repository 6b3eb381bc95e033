# bases/normalization.py
# Rescale orthonormal polynomials to their textbook normalizations.
from __future__ import annotations
from typing import Iterable, List

from orthopoly.polynomials.polynomial import Polynomial


def rescale_leading(p: Polynomial, leading: float) -> Polynomial:
    """Copy of p scaled so that its highest stored coefficient equals ``leading``."""
    lc = p.leading_coefficient
    if lc == 0:
        raise ZeroDivisionError("cannot rescale a polynomial with zero leading coefficient")
    return (leading / lc) * p


def classical_chebyshev(polys: Iterable[Polynomial]) -> List[Polynomial]:
    """
    Chebyshev normalization: T_0 = 1, leading coefficient 2^(n-1) for n >= 1.
    """
    out = []
    for n, p in enumerate(polys):
        out.append(rescale_leading(p, 1.0 if n == 0 else float(2 ** (n - 1))))
    return out


def classical_legendre(polys: Iterable[Polynomial]) -> List[Polynomial]:
    """Legendre normalization P_n(1) = 1."""
    out = []
    for p in polys:
        v = p.evaluate(1.0)
        if v == 0:
            raise ZeroDivisionError("polynomial vanishes at x = 1")
        out.append(p / v)
    return out
