"""Utilities for expression graphs."""

from .graph_utils import (
    iter_unique, count_unique_nodes, count_paths, graph_depth,
    collect_parameters, count_node_types, CallCounter
)
from .recursion import recursion_limit
from .validator import ExpressionValidator

__all__ = [
    'iter_unique', 'count_unique_nodes', 'count_paths', 'graph_depth',
    'collect_parameters', 'count_node_types', 'CallCounter',
    'recursion_limit', 'ExpressionValidator'
]
