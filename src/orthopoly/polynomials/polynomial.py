# polynomials/polynomial.py
from __future__ import annotations
import numbers
from typing import Iterable, Union

import numpy as np
from numpy.typing import DTypeLike

from orthopoly.errors import CoefficientIndexError
from orthopoly.utils.backend import ArrayLike, as_float_dtype

Scalar = Union[float, int, np.floating, np.integer]


def _is_scalar(s) -> bool:
    if isinstance(s, np.ndarray):
        return s.ndim == 0 and s.dtype.kind in "fiu"
    return isinstance(s, numbers.Real)


class Polynomial:
    """
    Dense single-variable polynomial with floating coefficients.

    ``coefficients[i]`` multiplies ``x**i``. The stored size is ``degree + 1``
    and may include trailing zeros: a zero leading coefficient does not
    shrink the storage (use :meth:`trim` for that), so ``degree`` is the
    storage degree, not necessarily the exact one.

    Parameters
    ----------
    coefficients : iterable of float
        Coefficients in ascending powers. Must not be empty.
    dtype : numpy floating dtype, optional
        Working precision (float64 by default).

    Notes
    -----
    Coefficient access is bounds-checked: reading or writing an index outside
    ``[0, len(p) - 1]`` raises :class:`~orthopoly.errors.CoefficientIndexError`.
    Storage only grows through ``+=`` / ``-=`` with a longer operand.
    """

    # numpy scalars on the left (np.float64(2) * p) must defer to __rmul__
    __array_ufunc__ = None

    def __init__(self, coefficients: Iterable[float], dtype: DTypeLike = None):
        if not isinstance(coefficients, np.ndarray):
            coefficients = list(coefficients)
        c = np.array(coefficients, dtype=as_float_dtype(dtype))
        if c.ndim != 1:
            raise ValueError(f"coefficients must be 1-D, got shape {c.shape}")
        if c.size == 0:
            raise ValueError("a polynomial needs at least one coefficient")
        self._c = c

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Polynomial":
        obj = cls.__new__(cls)
        obj._c = arr
        return obj

    # ---- factories ----------------------------------------------------------
    @classmethod
    def zeros(cls, degree: int, dtype: DTypeLike = None) -> "Polynomial":
        """Scratch polynomial with ``degree + 1`` zero coefficients."""
        if degree < 0:
            raise ValueError("degree must be >= 0")
        return cls._wrap(np.zeros(int(degree) + 1, dtype=as_float_dtype(dtype)))

    @classmethod
    def canonical(cls, n: int, dtype: DTypeLike = None) -> "Polynomial":
        """The monomial ``x**n`` (size ``n + 1``)."""
        p = cls.zeros(n, dtype=dtype)
        p._c[-1] = 1
        return p

    # ---- storage ------------------------------------------------------------
    def __len__(self) -> int:
        return int(self._c.shape[0])

    @property
    def degree(self) -> int:
        return len(self) - 1

    @property
    def dtype(self) -> np.dtype:
        return self._c.dtype

    @property
    def coefficients(self) -> np.ndarray:
        return self._c.copy()

    @property
    def leading_coefficient(self):
        return self._c[-1]

    def _check_index(self, i) -> int:
        if isinstance(i, (bool, np.bool_)) or not isinstance(i, (numbers.Integral, np.integer)):
            raise TypeError(f"coefficient index must be an integer, got {type(i).__name__}")
        if i < 0 or i >= len(self):
            raise CoefficientIndexError(i, len(self))
        return int(i)

    def coefficient_at(self, i: int):
        return self._c[self._check_index(i)]

    def __getitem__(self, i: int):
        return self.coefficient_at(i)

    def __setitem__(self, i: int, value: Scalar) -> None:
        self._c[self._check_index(i)] = value

    def __iter__(self):
        return iter(self._c.copy())

    def copy(self) -> "Polynomial":
        return Polynomial._wrap(self._c.copy())

    __copy__ = copy

    def trim(self, tol: float = 0.0) -> "Polynomial":
        """Copy without trailing coefficients of magnitude <= tol (keeps at least one)."""
        keep = np.nonzero(np.abs(self._c) > tol)[0]
        size = int(keep[-1]) + 1 if keep.size else 1
        return Polynomial._wrap(self._c[:size].copy())

    def _padded(self, size: int, dtype) -> np.ndarray:
        out = np.zeros(size, dtype=dtype)
        out[: len(self)] = self._c
        return out

    # ---- evaluation ---------------------------------------------------------
    def evaluate(self, x: ArrayLike):
        """
        Value of sum_i c_i x**i at a scalar or elementwise over an array.

        Powers are computed directly (no Horner scheme); ``0**0`` is 1.
        """
        xs = np.asarray(x, dtype=self._c.dtype)
        result = np.zeros_like(xs)
        for i, c in enumerate(self._c):
            result = result + c * xs ** i
        return result if result.ndim else result[()]

    def __call__(self, x: ArrayLike):
        return self.evaluate(x)

    def roots(self) -> np.ndarray:
        """Complex roots of the trimmed polynomial (empty for constants)."""
        c = self.trim()._c
        return np.polynomial.polynomial.polyroots(c.astype(np.float64))

    # ---- arithmetic ---------------------------------------------------------
    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        out = self._padded(max(len(self), len(other)), np.result_type(self._c, other._c))
        out[: len(other)] += other._c
        return Polynomial._wrap(out)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        out = self._padded(max(len(self), len(other)), np.result_type(self._c, other._c))
        out[: len(other)] -= other._c
        return Polynomial._wrap(out)

    def __neg__(self) -> "Polynomial":
        return Polynomial._wrap(-self._c)

    def __mul__(self, s: Scalar) -> "Polynomial":
        if not _is_scalar(s):
            return NotImplemented
        return Polynomial._wrap(self._c * s)

    def __rmul__(self, s: Scalar) -> "Polynomial":
        if not _is_scalar(s):
            return NotImplemented
        return Polynomial._wrap(s * self._c)

    def __truediv__(self, s: Scalar) -> "Polynomial":
        if not _is_scalar(s):
            return NotImplemented
        return Polynomial._wrap(self._c / s)

    def __iadd__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(other) > len(self):
            self._c = self._padded(len(other), self._c.dtype)
        self._c[: len(other)] += other._c
        return self

    def __isub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(other) > len(self):
            self._c = self._padded(len(other), self._c.dtype)
        self._c[: len(other)] -= other._c
        return self

    def __imul__(self, s: Scalar) -> "Polynomial":
        if not _is_scalar(s):
            return NotImplemented
        self._c *= s
        return self

    def __itruediv__(self, s: Scalar) -> "Polynomial":
        if not _is_scalar(s):
            return NotImplemented
        self._c /= s
        return self

    # ---- comparison ---------------------------------------------------------
    def allclose(self, other: "Polynomial", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        """Coefficient-wise comparison, the shorter operand padded with zeros."""
        size = max(len(self), len(other))
        dt = np.result_type(self._c, other._c)
        return bool(np.allclose(self._padded(size, dt), other._padded(size, dt), rtol=rtol, atol=atol))

    # ---- rendering ----------------------------------------------------------
    def __format__(self, spec: str) -> str:
        # ascending powers: c0 + c1*x + c2*x^2 ...; every stored term is shown
        spec = spec or ".6g"
        parts = []
        for i, c in enumerate(self._c):
            mono = "" if i == 0 else ("*x" if i == 1 else f"*x^{i}")
            mag = format(abs(c), spec)
            if i == 0:
                parts.append(("-" if c < 0 else "") + mag + mono)
            else:
                parts.append((" - " if c < 0 else " + ") + mag + mono)
        return "".join(parts)

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"Polynomial({self._c.tolist()!r})"
