# inner_products/weighted.py
from __future__ import annotations
from typing import Callable

import numpy as np

from orthopoly.inner_products.base import InnerProduct
from orthopoly.quadrature.composite import DEFAULT_PANEL_COUNT


class WeightedInnerProduct(InnerProduct):
    """
    Inner product with an arbitrary weight on [a, b].

    Parameters
    ----------
    weight : callable
        w(x), called with numpy arrays of quadrature nodes.
    a, b : float
        Domain bounds.
    order : int
        Gauss–Legendre order used on every panel.
    panels : int
        Number of composite panels.
    """

    def __init__(self, weight: Callable, a: float, b: float, order: int = 5,
                 panels: int = DEFAULT_PANEL_COUNT):
        if not callable(weight):
            raise TypeError("weight must be callable")
        self._weight = weight
        super().__init__(a, b, order=order, panels=panels)

    def weight(self, x):
        return self._weight(x)


class LegendreInnerProduct(InnerProduct):
    """w(x) = 1 on [-1, 1]."""

    def __init__(self, order: int = 5, panels: int = DEFAULT_PANEL_COUNT):
        super().__init__(-1.0, 1.0, order=order, panels=panels)

    def weight(self, x):
        return np.ones_like(np.asarray(x, dtype=float))


class ChebyshevInnerProduct(InnerProduct):
    """
    w(x) = 1 / sqrt(1 - x^2) on (-1, 1).

    The weight is singular at both ends. Gauss nodes are interior to every
    panel so +-1 is never sampled, but the two end panels are integrated
    poorly; orthogonality holds to roughly 1e-3.
    """

    def __init__(self, order: int = 5, panels: int = DEFAULT_PANEL_COUNT):
        super().__init__(-1.0, 1.0, order=order, panels=panels)

    def weight(self, x):
        x = np.asarray(x, dtype=float)
        return 1.0 / np.sqrt(1.0 - x * x)


class JacobiInnerProduct(InnerProduct):
    """
    w(x) = (1 - x)^alpha (1 + x)^beta on (-1, 1), alpha, beta > -1.

    (0, 0) is the Legendre weight, (-1/2, -1/2) the Chebyshev one.
    """

    def __init__(self, alpha: float, beta: float, order: int = 5,
                 panels: int = DEFAULT_PANEL_COUNT):
        if alpha <= -1.0 or beta <= -1.0:
            raise ValueError("Jacobi weight needs alpha > -1 and beta > -1")
        self._alpha = float(alpha)
        self._beta = float(beta)
        super().__init__(-1.0, 1.0, order=order, panels=panels)

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def beta(self) -> float:
        return self._beta

    def weight(self, x):
        x = np.asarray(x, dtype=float)
        return (1.0 - x) ** self._alpha * (1.0 + x) ** self._beta
