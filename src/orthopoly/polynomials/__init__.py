from orthopoly.polynomials.polynomial import Polynomial

__all__ = ["Polynomial"]
