"""Non-numeric interpreters for expression graphs."""

from .formatter import StringFormatter
from .sympy_lowering import SympyLowering, to_sympy, lambdify, parameter_symbol, parameter_indices

__all__ = ['StringFormatter', 'SympyLowering', 'to_sympy', 'lambdify', 'parameter_symbol', 'parameter_indices']
