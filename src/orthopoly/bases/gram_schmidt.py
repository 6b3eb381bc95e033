# bases/gram_schmidt.py
from __future__ import annotations
from time import perf_counter
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import DTypeLike
from rich.progress import Progress, BarColumn, TimeElapsedColumn, SpinnerColumn, TextColumn

from orthopoly.bases.base import Basis
from orthopoly.errors import DegenerateNormalization
from orthopoly.inner_products.base import InnerProduct
from orthopoly.polynomials.polynomial import Polynomial


class OrthonormalBasis(Basis):
    """
    Polynomials b_0..b_{d-1}, b_i of exact degree i, orthonormal under
    ``inner_product`` up to quadrature error.

    Immutable: indexing and iteration hand out copies.
    """

    def __init__(self, polynomials: Iterable[Polynomial], inner_product: InnerProduct):
        self._polys: Tuple[Polynomial, ...] = tuple(p.copy() for p in polynomials)
        self.inner_product = inner_product

    # ---- Basis interface ----
    def num_basis(self) -> int:
        return len(self._polys)

    def evaluate(self, i: int, t):
        if i < 0 or i >= len(self._polys):
            raise IndexError(f"basis index {i} out of range [0, {len(self._polys)-1}]")
        return self._polys[i].evaluate(t)

    def support(self, i: int):
        return self.inner_product.domain

    # ---- sequence ----
    def __len__(self) -> int:
        return len(self._polys)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [p.copy() for p in self._polys[i]]
        return self._polys[i].copy()

    def __iter__(self) -> Iterator[Polynomial]:
        return (p.copy() for p in self._polys)

    def polynomials(self) -> List[Polynomial]:
        return list(self)

    def __repr__(self) -> str:
        return f"OrthonormalBasis(dimension={len(self)}, inner_product={self.inner_product!r})"


class GramSchmidtBuilder:
    """
    Orthonormalize the monomials 1, x, ..., x^(d-1) under an inner product.

    Modified Gram–Schmidt: each projection <q, b_j> b_j is subtracted from q
    as soon as it is computed, so later projections see the updated q. Every
    build starts from scratch; inner products are not cached.

    Parameters
    ----------
    inner_product : InnerProduct
        The scalar product defining orthonormality.
    verbose : bool
        Show a progress bar over basis indices.
    dtype : numpy floating dtype, optional
        Coefficient precision of the produced polynomials.
    """

    def __init__(self, inner_product: InnerProduct, verbose: bool = False, dtype: DTypeLike = None):
        self.inner_product = inner_product
        self.verbose: bool = verbose
        self.dtype = dtype

        self.n_inner_products: int = 0
        self.time_build_s: Optional[float] = None

    def _dot(self, p: Polynomial, q: Polynomial):
        self.n_inner_products += 1
        return self.inner_product(p, q)

    def _normalize(self, q: Polynomial, index: int) -> None:
        sq = self._dot(q, q)
        # also rejects NaN
        if not sq > 0:
            raise DegenerateNormalization(index, sq)
        q *= np.sqrt(1.0 / sq)

    def build(self, dimension: int) -> OrthonormalBasis:
        dimension = int(dimension)
        if dimension < 1:
            raise ValueError("dimension must be >= 1")

        self.n_inner_products = 0
        t0 = perf_counter()

        progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold]Gram–Schmidt[/]"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            TimeElapsedColumn(),
            transient=False,
        ) if self.verbose else None

        if progress:
            progress.start()
            task = progress.add_task("gs", total=dimension)
        try:
            b0 = Polynomial.canonical(0, dtype=self.dtype)
            self._normalize(b0, 0)
            basis: List[Polynomial] = [b0]
            if progress:
                progress.update(task, advance=1)

            for i in range(1, dimension):
                q = Polynomial.canonical(i, dtype=self.dtype)
                for j in range(i):
                    q -= self._dot(q, basis[j]) * basis[j]
                self._normalize(q, i)
                basis.append(q)
                if progress:
                    progress.update(task, advance=1)
        finally:
            if progress:
                progress.stop()

        self.time_build_s = perf_counter() - t0
        return OrthonormalBasis(basis, self.inner_product)


def build_orthonormal_basis(dimension: int, inner_product: InnerProduct,
                            verbose: bool = False) -> OrthonormalBasis:
    """Shortcut for ``GramSchmidtBuilder(inner_product, verbose).build(dimension)``."""
    return GramSchmidtBuilder(inner_product, verbose=verbose).build(dimension)
