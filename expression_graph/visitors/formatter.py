from ..visitor import ExprVisitor


class StringFormatter(ExprVisitor[str]):
  """Renders a fully parenthesised infix string"""

  def __init__(self, precision: int = 3):
    self.precision = precision

  def on_constant(self, value: float) -> str:
    return f"{value:.{self.precision}f}"

  def on_parameter(self, index: int, name: str) -> str:
    return name if name else f"p{index}"

  def on_add(self, lhs_result: str, rhs_result: str) -> str:
    return f"({lhs_result} + {rhs_result})"

  def on_mul(self, lhs_result: str, rhs_result: str) -> str:
    return f"({lhs_result} * {rhs_result})"
