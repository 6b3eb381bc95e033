from orthopoly.inner_products.base import InnerProduct
from orthopoly.inner_products.weighted import (
    WeightedInnerProduct,
    LegendreInnerProduct,
    ChebyshevInnerProduct,
    JacobiInnerProduct,
)

__all__ = [
    "InnerProduct",
    "WeightedInnerProduct",
    "LegendreInnerProduct",
    "ChebyshevInnerProduct",
    "JacobiInnerProduct",
]
