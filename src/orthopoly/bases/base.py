from typing import Tuple, Protocol

class Basis(Protocol):
    def num_basis(self) -> int:
        """Number of basis functions."""
        ...

    def evaluate(self, i: int, t: float) -> float:
        """Value of the i-th basis function at t (scalar or NumPy array)."""
        ...

    def support(self, i: int) -> Tuple[float, float]:
        """Interval [a, b] the i-th basis function is orthogonal on."""
        ...
