"""Expression Graph

Immutable arithmetic expression graphs with shared sub-expressions,
interpreted through visitors.
"""

from .errors import ExpressionGraphError, ParameterUnbound, IdentifierExhausted, IncompleteVisitorError
from .core import (
    ExprId, IdGenerator, get_global_generator, set_global_generator, reset_global_generator, next_id,
    Node, ConstantNode, ParameterNode, AddNode, MulNode, NodeType
)
from .expression import Expression, as_expression, constant, parameter, add, mul
from .visitor import ExprVisitor, walk
from .evaluation import NumericEvaluator, evaluate, ArrayEvaluator, evaluate_array
from .visitors import StringFormatter, SympyLowering, to_sympy, lambdify
from .utils import recursion_limit, ExpressionValidator
from .logging_system import LogLevel, get_logger, configure_logging, set_log_level

__version__ = "0.1.0"

__all__ = [
    "ExpressionGraphError", "ParameterUnbound", "IdentifierExhausted", "IncompleteVisitorError",
    "ExprId", "IdGenerator", "get_global_generator", "set_global_generator", "reset_global_generator", "next_id",
    "Node", "ConstantNode", "ParameterNode", "AddNode", "MulNode", "NodeType",
    "Expression", "as_expression", "constant", "parameter", "add", "mul",
    "ExprVisitor", "walk",
    "NumericEvaluator", "evaluate", "ArrayEvaluator", "evaluate_array",
    "StringFormatter", "SympyLowering", "to_sympy", "lambdify",
    "recursion_limit", "ExpressionValidator",
    "LogLevel", "get_logger", "configure_logging", "set_log_level",
]
