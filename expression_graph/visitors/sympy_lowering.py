import numpy as np
import sympy as sp
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from ..errors import ParameterUnbound
from ..expression import Expression
from ..logging_system import log_warning
from ..visitor import ExprVisitor, walk


# Digits needed to round-trip any float64 through its decimal form
FLOAT_DIGITS = 17


def parameter_symbol(index: int) -> sp.Symbol:
  # Keyed by index; names are diagnostic and may collide
  return sp.Symbol(f'p{index}')


class SympyLowering(ExprVisitor[sp.Expr]):
  """Lowers a graph to a SymPy expression.

  Stands in for a compiler backend: each variant maps to one primitive of
  the target. Constants become ``sp.Float`` and parameters become symbols
  ``p{index}``; the names seen for each index are kept in ``names``.
  """

  def __init__(self):
    self.names: Dict[int, str] = {}

  def on_constant(self, value: float) -> sp.Expr:
    return sp.Float(value, FLOAT_DIGITS)

  def on_parameter(self, index: int, name: str) -> sp.Expr:
    self.names.setdefault(index, name)
    return parameter_symbol(index)

  def on_add(self, lhs_result: sp.Expr, rhs_result: sp.Expr) -> sp.Expr:
    return sp.Add(lhs_result, rhs_result, evaluate=False)

  def on_mul(self, lhs_result: sp.Expr, rhs_result: sp.Expr) -> sp.Expr:
    return sp.Mul(lhs_result, rhs_result, evaluate=False)


def to_sympy(expr: Expression) -> sp.Expr:
  return walk(expr, SympyLowering())


def parameter_indices(sympy_expr: sp.Expr) -> List[int]:
  """Sorted parameter indices appearing in a lowered expression"""
  return sorted(int(symbol.name[1:]) for symbol in sympy_expr.free_symbols
                if symbol.name.startswith('p') and symbol.name[1:].isdigit())


def lambdify(expr: Expression,
             column_map: Optional[Mapping[int, int]] = None) -> Tuple[Callable[[np.ndarray], np.ndarray], List[int]]:
  """
  Compile an expression into a numpy function of a sample matrix

  Returns:
      (func, indices) where func(X) evaluates every row of X and indices
      lists the parameter indices the expression reads, in argument order
  """
  lowering = SympyLowering()
  sympy_expr = walk(expr, lowering)
  indices = parameter_indices(sympy_expr)
  symbols = [parameter_symbol(index) for index in indices]
  lambda_func = sp.lambdify(symbols, sympy_expr, modules='numpy')

  def column_for(index: int, n_columns: int) -> int:
    if column_map is not None:
      column = column_map.get(index)
    else:
      column = index
    if column is None or not 0 <= column < n_columns:
      name = lowering.names.get(index, '')
      log_warning(f"Parameter {index} ('{name}') has no column in X")
      raise ParameterUnbound(index, name)
    return column

  def wrapper(X: np.ndarray) -> np.ndarray:
    X_arr = np.asarray(X, dtype=np.float64)
    if X_arr.ndim == 1:
      X_arr = X_arr.reshape(-1, 1)
    columns = [X_arr[:, column_for(i, X_arr.shape[1])] for i in indices]
    result = lambda_func(*columns)
    # Constant expressions come back as scalars
    return np.broadcast_to(np.asarray(result, dtype=np.float64), (X_arr.shape[0],)).copy()

  return wrapper, indices
