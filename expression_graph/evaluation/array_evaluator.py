import numpy as np
from typing import Mapping, Optional

from ..core.operators import evaluate_constant, evaluate_parameter, evaluate_add, evaluate_mul
from ..errors import ParameterUnbound
from ..expression import Expression
from ..logging_system import log_debug, log_warning
from ..visitor import ExprVisitor, walk


class ArrayEvaluator(ExprVisitor[np.ndarray]):
  """Evaluates an expression for every row of a sample matrix at once.

  Parameter ``index`` reads column ``index`` of ``X`` unless ``column_map``
  redirects it. Results are not sanitised: NaN and infinities in the
  data or constants come straight through.
  """

  def __init__(self, X: np.ndarray, column_map: Optional[Mapping[int, int]] = None):
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
      X = X.reshape(-1, 1)
    if X.ndim != 2:
      raise ValueError(f"X must be 1-D or 2-D, got shape {X.shape}")
    self.X = np.ascontiguousarray(X)
    self.column_map = dict(column_map) if column_map is not None else None

  @property
  def n_samples(self) -> int:
    return self.X.shape[0]

  def _column_for(self, index: int) -> Optional[int]:
    if self.column_map is not None:
      return self.column_map.get(index)
    if index < self.X.shape[1]:
      return index
    return None

  def on_constant(self, value: float) -> np.ndarray:
    return evaluate_constant(self.n_samples, value)

  def on_parameter(self, index: int, name: str) -> np.ndarray:
    column = self._column_for(index)
    if column is None or not 0 <= column < self.X.shape[1]:
      log_warning(f"Parameter {index} ('{name}') has no column in X{self.X.shape}")
      raise ParameterUnbound(index, name)
    return evaluate_parameter(self.X, column)

  def on_add(self, lhs_result: np.ndarray, rhs_result: np.ndarray) -> np.ndarray:
    return evaluate_add(lhs_result, rhs_result)

  def on_mul(self, lhs_result: np.ndarray, rhs_result: np.ndarray) -> np.ndarray:
    return evaluate_mul(lhs_result, rhs_result)

  def evaluate(self, expr: Expression) -> np.ndarray:
    result = walk(expr, self)
    log_debug(f"evaluated expression #{int(expr.id)} over {self.n_samples} samples")
    return result


def evaluate_array(expr: Expression, X: np.ndarray,
                   column_map: Optional[Mapping[int, int]] = None) -> np.ndarray:
  return ArrayEvaluator(X, column_map).evaluate(expr)
