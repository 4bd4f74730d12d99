import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from expression_graph import (
  ParameterUnbound, NumericEvaluator, constant, parameter, evaluate, evaluate_array,
  to_sympy, lambdify, LogLevel, configure_logging
)
from expression_graph.utils import count_unique_nodes, count_paths, collect_parameters


def build_polynomial():
  """Build 3*x^2 + 2*x*y + 1; the parameter x is shared between terms"""
  x = parameter(0, "x")
  y = parameter(1, "y")
  x_sq = x * x
  return 3.0 * x_sq + 2.0 * x * y + constant(1.0)


def main():
  configure_logging(LogLevel.MINIMAL)

  expr = build_polynomial()
  print(f"Expression: {expr}")
  print(f"Parameters: {collect_parameters(expr)}")
  print(f"Distinct nodes: {count_unique_nodes(expr)}, nodes visited per walk: {count_paths(expr)}")

  # Scalar evaluation with an explicit binding context
  evaluator = NumericEvaluator({0: 2.0, 1: -1.0})
  print(f"f(2, -1) = {evaluator.evaluate(expr)}")

  try:
    evaluate(expr, {0: 2.0})
  except ParameterUnbound as e:
    print(f"Expected failure: {e}")

  # Batch evaluation over samples, rows are (x, y)
  np.random.seed(42)
  X = np.random.uniform(-1, 1, (5, 2))
  print("Array evaluation:", evaluate_array(expr, X))

  # Lowering to another backend
  print("SymPy:", to_sympy(expr))
  func, indices = lambdify(expr)
  print(f"Lambdified over parameters {indices}:", func(X))


if __name__ == "__main__":
  main()
