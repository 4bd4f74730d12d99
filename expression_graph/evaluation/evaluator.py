from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..errors import ParameterUnbound
from ..expression import Expression
from ..logging_system import log_debug, log_warning
from ..visitor import ExprVisitor, walk


class NumericEvaluator(ExprVisitor[float]):
  """Evaluates an expression to a float given parameter bindings.

  The binding context maps parameter index to value and must be filled by
  the caller, through the constructor, ``bind`` or ``update``. Arithmetic
  follows IEEE 754 double precision, so NaN and infinities propagate.
  """

  def __init__(self, bindings: Optional[Mapping[int, float]] = None):
    self._context: Dict[int, float] = {}
    if bindings:
      self.update(bindings)

  @property
  def bindings(self) -> Mapping[int, float]:
    return MappingProxyType(self._context)

  def bind(self, index: int, value: float) -> 'NumericEvaluator':
    self._context[index] = float(value)
    return self

  def update(self, bindings: Mapping[int, float]) -> 'NumericEvaluator':
    for index, value in bindings.items():
      self.bind(index, value)
    return self

  def unbind(self, index: int):
    self._context.pop(index, None)

  def on_constant(self, value: float) -> float:
    return value

  def on_parameter(self, index: int, name: str) -> float:
    try:
      return self._context[index]
    except KeyError:
      log_warning(f"Parameter {index} ('{name}') has no binding")
      raise ParameterUnbound(index, name) from None

  def on_add(self, lhs_result: float, rhs_result: float) -> float:
    return lhs_result + rhs_result

  def on_mul(self, lhs_result: float, rhs_result: float) -> float:
    return lhs_result * rhs_result

  def evaluate(self, expr: Expression) -> float:
    result = walk(expr, self)
    log_debug(f"evaluated expression #{int(expr.id)} -> {result!r}")
    return result


def evaluate(expr: Expression, bindings: Optional[Mapping[int, float]] = None) -> float:
  return NumericEvaluator(bindings).evaluate(expr)
