"""
test_gram_schmidt.py
--------------------

Orthonormal bases built with modified Gram–Schmidt.
"""

import numpy as np
import pytest

from orthopoly.bases import (
    GramSchmidtBuilder,
    OrthonormalBasis,
    build_orthonormal_basis,
    classical_chebyshev,
)
from orthopoly.diagnostics import chebyshev_roots, gram_matrix, orthonormality_error
from orthopoly.errors import DegenerateNormalization, UnsupportedQuadratureOrder
from orthopoly.inner_products import LegendreInnerProduct, WeightedInnerProduct


class CountingInnerProduct(LegendreInnerProduct):
    """Legendre inner product that records how often it is evaluated."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        object.__setattr__(self, "calls", [0])

    def __call__(self, p, q):
        self.calls[0] += 1
        return super().__call__(p, q)


class TestLegendreBasis:

    def test_constant_member(self, legendre_basis):
        b0 = legendre_basis[0]
        assert len(b0) == 1
        np.testing.assert_allclose(b0(np.linspace(-1, 1, 5)), 1.0 / np.sqrt(2.0), rtol=1e-9)

    def test_exact_degrees(self, legendre_basis):
        assert len(legendre_basis) == 5
        for i, p in enumerate(legendre_basis):
            assert p.degree == i
            assert abs(p.leading_coefficient) > 1e-8

    def test_orthonormal(self, legendre_basis, legendre_dot):
        G = gram_matrix(legendre_basis, legendre_dot)
        np.testing.assert_allclose(G, np.eye(5), atol=1e-3)
        assert orthonormality_error(legendre_basis, legendre_dot) < 1e-8

    def test_known_roots(self, legendre_basis):
        b2, b3 = legendre_basis[2], legendre_basis[3]
        for r in (1.0 / np.sqrt(3.0), -1.0 / np.sqrt(3.0)):
            assert abs(b2(r)) < 1e-6
        for r in (0.0, np.sqrt(3.0 / 5.0), -np.sqrt(3.0 / 5.0)):
            assert abs(b3(r)) < 1e-6

    def test_matches_scaled_legendre_polynomials(self, legendre_basis):
        for n, p in enumerate(legendre_basis):
            ref = np.sqrt((2 * n + 1) / 2.0) * np.polynomial.legendre.leg2poly([0] * n + [1])
            np.testing.assert_allclose(p.coefficients, ref, atol=1e-6)


class TestChebyshevBasis:

    def test_orthonormal_under_numeric_product(self, chebyshev_basis, chebyshev_dot):
        assert orthonormality_error(chebyshev_basis, chebyshev_dot) < 1e-8

    def test_classical_roots(self, chebyshev_basis):
        tn = classical_chebyshev(chebyshev_basis)
        for n in range(1, 5):
            assert tn[n].leading_coefficient == pytest.approx(2.0 ** (n - 1))
            found = np.sort(tn[n].roots().real)
            np.testing.assert_allclose(found, np.sort(chebyshev_roots(n)), atol=1e-3)

    def test_values_at_classical_roots(self, chebyshev_basis):
        tn = classical_chebyshev(chebyshev_basis)
        for n in range(1, 5):
            assert np.max(np.abs(tn[n](chebyshev_roots(n)))) < 5e-3


class TestBuilder:

    def test_dimension_one(self):
        basis = build_orthonormal_basis(1, LegendreInnerProduct(panels=10))
        assert len(basis) == 1
        assert len(basis[0]) == 1
        assert basis[0][0] == pytest.approx(1.0 / np.sqrt(2.0))

    @pytest.mark.parametrize("dimension", [0, -3])
    def test_invalid_dimension(self, dimension):
        with pytest.raises(ValueError):
            build_orthonormal_basis(dimension, LegendreInnerProduct(panels=10))

    def test_inner_product_count_is_quadratic(self):
        dot = CountingInnerProduct(panels=10)
        builder = GramSchmidtBuilder(dot)
        builder.build(5)
        # 1 norm for b_0, then i projections + 1 norm for each b_i
        assert dot.calls[0] == 15
        assert builder.n_inner_products == 15
        assert builder.time_build_s is not None and builder.time_build_s >= 0.0

    def test_no_caching_between_builds(self):
        dot = CountingInnerProduct(panels=10)
        builder = GramSchmidtBuilder(dot)
        first = builder.build(4)
        second = builder.build(4)
        assert dot.calls[0] == 2 * 10
        for p, q in zip(first, second):
            assert p.allclose(q)

    def test_degenerate_weight(self):
        dot = WeightedInnerProduct(lambda x: -np.ones_like(x), -1.0, 1.0, panels=10)
        with pytest.raises(DegenerateNormalization) as exc:
            build_orthonormal_basis(3, dot)
        assert exc.value.index == 0
        assert exc.value.squared_norm < 0

    def test_nan_norm_is_degenerate(self):
        dot = WeightedInnerProduct(lambda x: np.full_like(x, np.nan), -1.0, 1.0, panels=10)
        with pytest.raises(DegenerateNormalization):
            build_orthonormal_basis(2, dot)

    def test_unsupported_order_propagates(self):
        with pytest.raises(UnsupportedQuadratureOrder):
            build_orthonormal_basis(3, LegendreInnerProduct(order=0, panels=10))

    def test_float32_coefficients(self):
        basis = GramSchmidtBuilder(LegendreInnerProduct(panels=10), dtype=np.float32).build(3)
        assert all(p.dtype == np.float32 for p in basis)

    def test_verbose_progress(self):
        basis = GramSchmidtBuilder(LegendreInnerProduct(panels=10), verbose=True).build(3)
        assert len(basis) == 3


class TestOrthonormalBasis:

    def test_basis_interface(self, legendre_basis):
        assert isinstance(legendre_basis, OrthonormalBasis)
        assert legendre_basis.num_basis() == 5
        assert legendre_basis.support(2) == (-1.0, 1.0)
        assert legendre_basis.evaluate(0, 0.3) == pytest.approx(1.0 / np.sqrt(2.0))
        with pytest.raises(IndexError):
            legendre_basis.evaluate(5, 0.0)

    def test_slice_returns_copies(self, legendre_basis):
        head = legendre_basis[:2]
        assert isinstance(head, list)
        assert [p.degree for p in head] == [0, 1]
        head[0] *= 3.0
        assert legendre_basis[0][0] == pytest.approx(1.0 / np.sqrt(2.0))

    def test_members_are_copies(self, legendre_basis):
        p = legendre_basis[1]
        p *= 100.0
        p[0] = 7.0
        assert legendre_basis[1][0] == pytest.approx(0.0, abs=1e-12)
        assert legendre_basis[1].leading_coefficient == pytest.approx(np.sqrt(1.5))
        assert len(legendre_basis.polynomials()) == 5
