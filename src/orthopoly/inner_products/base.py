# inner_products/base.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Tuple

import numpy as np

from orthopoly.polynomials.polynomial import Polynomial
from orthopoly.quadrature.composite import DEFAULT_PANEL_COUNT, integrate
from orthopoly.utils.backend import ArrayLike


class InnerProduct(ABC):
    """
    Weighted L2 inner product <P, Q> = int_a^b w(x) P(x) Q(x) dx.

    The integral is approximated with the composite Gauss–Legendre scheme of
    :func:`orthopoly.quadrature.integrate` using ``order`` nodes on each of
    ``panels`` equal panels. Subclasses only supply the weight.

    Instances are immutable once constructed. The quadrature order is not
    checked here: an unsupported order fails on the first evaluation.
    """

    def __init__(self, a: float, b: float, order: int = 5, panels: int = DEFAULT_PANEL_COUNT):
        if not b > a:
            raise ValueError(f"domain must satisfy a < b, got [{a}, {b}]")
        self._a = float(a)
        self._b = float(b)
        self._order = order
        self._panels = int(panels)
        self._frozen = True

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    @abstractmethod
    def weight(self, x: ArrayLike) -> ArrayLike:
        """Weight function, evaluated elementwise."""
        ...

    @property
    def domain(self) -> Tuple[float, float]:
        return self._a, self._b

    @property
    def order(self) -> int:
        return self._order

    @property
    def panels(self) -> int:
        return self._panels

    def integrand(self, p: Polynomial, q: Polynomial) -> Callable[[ArrayLike], ArrayLike]:
        def f(x):
            return self.weight(x) * p.evaluate(x) * q.evaluate(x)
        return f

    def __call__(self, p: Polynomial, q: Polynomial):
        return integrate(self._a, self._b, self.integrand(p, q), self._order, panels=self._panels)

    def norm(self, p: Polynomial):
        return np.sqrt(self(p, p))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(domain=[{self._a}, {self._b}], "
                f"order={self._order}, panels={self._panels})")
