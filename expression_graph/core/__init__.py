"""Core expression graph components."""

from .identifiers import (
    ExprId, IdGenerator, MAX_ID, get_global_generator, set_global_generator, reset_global_generator, next_id
)
from .node import Node, ConstantNode, ParameterNode, BinaryOpNode, AddNode, MulNode, MAX_PARAMETER_INDEX
from .operators import (
    NodeType, OP_SYMBOLS,
    evaluate_constant, evaluate_parameter, evaluate_add, evaluate_mul
)

__all__ = [
    'ExprId', 'IdGenerator', 'MAX_ID', 'get_global_generator', 'set_global_generator',
    'reset_global_generator', 'next_id',
    'Node', 'ConstantNode', 'ParameterNode', 'BinaryOpNode', 'AddNode', 'MulNode', 'MAX_PARAMETER_INDEX',
    'NodeType', 'OP_SYMBOLS',
    'evaluate_constant', 'evaluate_parameter', 'evaluate_add', 'evaluate_mul'
]
