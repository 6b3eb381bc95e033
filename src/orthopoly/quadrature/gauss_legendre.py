# quadrature/gauss_legendre.py
# Fixed Gauss–Legendre rules (orders 1..5) on a single interval.
from __future__ import annotations
from typing import Callable, Dict, Tuple

import numpy as np

from orthopoly.errors import UnsupportedQuadratureOrder
from orthopoly.utils.backend import ArrayLike


def _symmetric(pairs, center_weight=None):
    # pairs: [(x, w), ...] with x > 0, mirrored about 0
    nodes = [-x for x, _ in reversed(pairs)]
    weights = [w for _, w in reversed(pairs)]
    if center_weight is not None:
        nodes.append(0.0)
        weights.append(center_weight)
    nodes += [x for x, _ in pairs]
    weights += [w for _, w in pairs]
    return np.array(nodes, dtype=float), np.array(weights, dtype=float)


# --- Gauss–Legendre rules on [-1, 1], closed forms -------------------------
# (nodes ascending; the k-node rule is exact for polynomials up to degree 2k-1)
GAUSS_LEGENDRE_RULES: Dict[int, Tuple[np.ndarray, np.ndarray]] = {
    1: (np.array([0.0]), np.array([2.0])),
    2: _symmetric([(1.0 / np.sqrt(3.0), 1.0)]),
    3: _symmetric([(np.sqrt(3.0 / 5.0), 5.0 / 9.0)], center_weight=8.0 / 9.0),
    4: _symmetric([
        (np.sqrt(3.0 / 7.0 - 2.0 / 7.0 * np.sqrt(6.0 / 5.0)), (18.0 + np.sqrt(30.0)) / 36.0),
        (np.sqrt(3.0 / 7.0 + 2.0 / 7.0 * np.sqrt(6.0 / 5.0)), (18.0 - np.sqrt(30.0)) / 36.0),
    ]),
    5: _symmetric([
        (np.sqrt(5.0 - 2.0 * np.sqrt(10.0 / 7.0)) / 3.0, (322.0 + 13.0 * np.sqrt(70.0)) / 900.0),
        (np.sqrt(5.0 + 2.0 * np.sqrt(10.0 / 7.0)) / 3.0, (322.0 - 13.0 * np.sqrt(70.0)) / 900.0),
    ], center_weight=128.0 / 225.0),
}

SUPPORTED_ORDERS = tuple(sorted(GAUSS_LEGENDRE_RULES))


def check_order(order: int) -> int:
    try:
        known = not isinstance(order, (bool, np.bool_)) and order in GAUSS_LEGENDRE_RULES
    except TypeError:
        # unhashable, e.g. a list or an array
        known = False
    if not known:
        raise UnsupportedQuadratureOrder(order, SUPPORTED_ORDERS)
    return int(order)


def gauss_legendre_rule(order: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (x, w) nodes and weights of the Gauss–Legendre rule on [-1, 1].
    """
    x, w = GAUSS_LEGENDRE_RULES[check_order(order)]
    return x.copy(), w.copy()


def quadrature(a: ArrayLike, b: ArrayLike, f: Callable, order: int):
    """
    Integrate f on [a, b] with the Gauss–Legendre rule of the given order.

    Parameters
    ----------
    a, b : float or np.ndarray
        Interval bounds. Equal-shaped arrays apply the rule to every
        [a[i], b[i]] at once; ``f`` then receives arrays of that shape.
    f : callable
        Integrand.
    order : int
        Number of nodes, 1..5. Order 1 is the midpoint rule.

    Returns
    -------
    float or np.ndarray
        alpha * sum_k w_k f(alpha * x_k + beta) with beta = (a+b)/2 and
        alpha = (b-a)/2, one value per interval.

    Raises
    ------
    UnsupportedQuadratureOrder
        If ``order`` is not in 1..5 (``f`` is never called).
    """
    x, w = GAUSS_LEGENDRE_RULES[check_order(order)]
    a = np.asarray(a)
    b = np.asarray(b)
    alpha = 0.5 * (b - a)
    beta = 0.5 * (a + b)
    total = 0.0
    for xk, wk in zip(x, w):
        total = total + wk * f(alpha * xk + beta)
    val = alpha * total
    return val[()] if np.ndim(val) == 0 else val
