from typing import Union
import numpy as np
from numpy.typing import DTypeLike

ArrayLike = Union[np.ndarray, float]


def as_float_dtype(dtype: DTypeLike = None) -> np.dtype:
    # None means the default working precision
    if dtype is None:
        return np.dtype(np.float64)
    dt = np.dtype(dtype)
    if dt.kind != "f":
        raise TypeError(f"polynomial coefficients need a floating dtype, got {dt}")
    return dt


def to_float(x: Union[np.generic, np.ndarray, float]) -> float:
    # Pulls a scalar (numpy or Python) to a Python float for printing / JSON
    if isinstance(x, np.ndarray):
        # x should be rank-0 here
        return float(x.item())
    return float(x)
