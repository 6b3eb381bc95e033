# quadrature/composite.py
from __future__ import annotations
from typing import Callable

import numpy as np

from orthopoly.quadrature.gauss_legendre import check_order, quadrature

# Fixed panel count of the composite rule; not adaptive.
DEFAULT_PANEL_COUNT = 100_000


def integrate(
    a: float,
    b: float,
    f: Callable,
    order: int,
    panels: int = DEFAULT_PANEL_COUNT,
    vectorized: bool = True,
):
    """
    Composite Gauss–Legendre approximation of the integral of f over [a, b].

    [a, b] is cut into ``panels`` equal panels [a + i*h, a + (i+1)*h] and the
    order-``order`` rule is applied on each; the panel values are summed.
    There is no error estimate and no refinement: accuracy is controlled only
    through ``order`` and ``panels``.

    Parameters
    ----------
    a, b : float
        Integration bounds.
    f : callable
        Integrand. With ``vectorized=True`` it is called with arrays of nodes
        (one entry per panel) and must work elementwise like a numpy ufunc.
        Scalar-only callables need ``vectorized=False``.
    order : int
        Quadrature order per panel, 1..5.
    panels : int
        Number of panels (default ``DEFAULT_PANEL_COUNT``).

    Raises
    ------
    UnsupportedQuadratureOrder
        For an order outside 1..5, before ``f`` is evaluated.
    """
    order = check_order(order)
    panels = int(panels)
    if panels < 1:
        raise ValueError("panels must be >= 1")

    func = f if vectorized else np.vectorize(f, otypes=[float])
    h = (b - a) / panels
    i = np.arange(panels)
    lefts = a + i * h
    rights = a + (i + 1) * h
    return np.sum(quadrature(lefts, rights, func, order))
