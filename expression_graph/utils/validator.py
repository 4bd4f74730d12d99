import numpy as np
from typing import List, Mapping, Optional

from ..core.node import ConstantNode, ParameterNode
from ..expression import Expression
from .graph_utils import iter_unique


class ExpressionValidator:
  """Consumer-side checks builders deliberately skip"""

  @staticmethod
  def is_valid_expression(expr: Expression, bindings: Optional[Mapping[int, float]] = None) -> bool:
    return not ExpressionValidator.find_problems(expr, bindings)

  @staticmethod
  def find_problems(expr: Expression, bindings: Optional[Mapping[int, float]] = None) -> List[str]:
    """
    Describe every problem found in the graph.

    Non-finite constants are always reported. Parameters are only checked
    when a binding context is given, in which case each index must be bound
    to a finite value.
    """
    problems = []
    for current in iter_unique(expr):
      node = current.node
      if isinstance(node, ConstantNode):
        if not np.isfinite(node.value):
          problems.append(f"#{int(current.id)}: non-finite constant {node.value!r}")
      elif isinstance(node, ParameterNode) and bindings is not None:
        if node.index not in bindings:
          problems.append(f"#{int(current.id)}: parameter {node.index} ('{node.name}') is unbound")
        elif not np.isfinite(bindings[node.index]):
          problems.append(f"#{int(current.id)}: parameter {node.index} ('{node.name}') "
                          f"bound to non-finite {bindings[node.index]!r}")
    return problems
