from __future__ import annotations
from typing import Sequence, Tuple

import numpy as np

from orthopoly.inner_products.base import InnerProduct
from orthopoly.polynomials.polynomial import Polynomial


def gram_matrix(polys: Sequence[Polynomial], inner_product: InnerProduct) -> np.ndarray:
    """
    G[i, j] = <b_i, b_j>. Symmetric, so only the upper triangle is integrated.
    """
    polys = list(polys)
    d = len(polys)
    G = np.empty((d, d), dtype=float)
    for i in range(d):
        for j in range(i, d):
            G[i, j] = G[j, i] = float(inner_product(polys[i], polys[j]))
    return G


def orthonormality_error_from_gram(G: np.ndarray) -> float:
    """max_ij |G[i, j] - delta_ij|"""
    G = np.asarray(G, dtype=float)
    return float(np.max(np.abs(G - np.eye(G.shape[0]))))


def orthonormality_error(polys: Sequence[Polynomial], inner_product: InnerProduct) -> float:
    """max_ij |<b_i, b_j> - delta_ij|"""
    return orthonormality_error_from_gram(gram_matrix(polys, inner_product))


def eigen_spectrum(G: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    # Descending eigenvalues of the symmetric Gram matrix
    w, V = np.linalg.eigh(0.5 * (G + G.T))
    idx = np.argsort(w)[::-1]
    return w[idx], V[:, idx]


def condition_number(G: np.ndarray) -> float:
    w, _ = eigen_spectrum(G)
    if w[-1] <= 0:
        return float("inf")
    return float(w[0] / w[-1])


def root_residuals(p: Polynomial, roots: Sequence[float]) -> np.ndarray:
    """|p(r)| for each expected root r."""
    return np.abs(np.asarray(p.evaluate(np.asarray(roots, dtype=float)), dtype=float))


def chebyshev_roots(n: int) -> np.ndarray:
    """Roots cos((2i-1) pi / (2n)), i = 1..n, of T_n."""
    if n < 1:
        return np.empty(0)
    i = np.arange(1, n + 1)
    return np.cos((2.0 * i - 1.0) * np.pi / (2.0 * n))


def legendre_known_roots(n: int) -> np.ndarray:
    """Closed-form roots of P_n for n <= 3."""
    table = {
        0: [],
        1: [0.0],
        2: [-1.0 / np.sqrt(3.0), 1.0 / np.sqrt(3.0)],
        3: [-np.sqrt(3.0 / 5.0), 0.0, np.sqrt(3.0 / 5.0)],
    }
    if n not in table:
        raise ValueError(f"closed-form Legendre roots only tabulated for n <= 3, got {n}")
    return np.array(table[n], dtype=float)
