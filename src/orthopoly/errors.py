# errors.py
from __future__ import annotations


class OrthopolyError(Exception):
    """Base class for every error raised by orthopoly."""


class UnsupportedQuadratureOrder(OrthopolyError, ValueError):
    """Raised when a Gauss–Legendre rule of the requested order is not tabulated."""

    def __init__(self, order, supported=(1, 2, 3, 4, 5)):
        self.order = order
        self.supported = tuple(supported)
        super().__init__(
            f"no quadrature rule for order {order!r} "
            f"(supported orders: {', '.join(str(k) for k in self.supported)})"
        )


class DegenerateNormalization(OrthopolyError, ArithmeticError):
    """Raised when a basis vector has a non-positive squared norm."""

    def __init__(self, index: int, squared_norm: float):
        self.index = int(index)
        self.squared_norm = float(squared_norm)
        super().__init__(
            f"cannot normalize basis vector {self.index}: "
            f"squared norm is {self.squared_norm!r} (must be > 0)"
        )


class CoefficientIndexError(OrthopolyError, IndexError):
    """Raised on coefficient access outside the stored range."""

    def __init__(self, index, size: int):
        self.index = index
        self.size = int(size)
        super().__init__(f"coefficient index {index} out of range [0, {self.size - 1}]")
