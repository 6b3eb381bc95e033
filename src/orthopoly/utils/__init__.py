from orthopoly.utils.backend import as_float_dtype, to_float, ArrayLike

__all__ = ["as_float_dtype", "to_float", "ArrayLike"]
