"""
Graph Utility Functions

Traversal and analysis helpers for expression graphs. Helpers that look at
distinct nodes work by identifier and are iterative, so they are safe on
graphs deeper than the recursion limit and linear in the number of
distinct handles even when sub-expressions are heavily shared.
"""

from typing import Dict, Iterator, List, Set, Tuple

from ..core.node import ParameterNode
from ..core.operators import NodeType
from ..expression import Expression
from ..visitor import ExprVisitor


def iter_unique(expr: Expression) -> Iterator[Expression]:
    """
    Yield every distinct handle reachable from expr exactly once.

    Handles are yielded in post-order (children before parents, left
    before right), each the first time it is completed.
    """
    seen: Set[int] = set()
    stack: List[Tuple[Expression, bool]] = [(expr, False)]

    while stack:
        current, expanded = stack.pop()
        if current.id in seen:
            continue
        if expanded:
            seen.add(current.id)
            yield current
            continue
        stack.append((current, True))
        # Push rhs first so lhs is completed first
        for child in reversed(current.node.children()):
            if child.id not in seen:
                stack.append((child, False))


def count_unique_nodes(expr: Expression) -> int:
    """Number of distinct handles in the graph"""
    return sum(1 for _ in iter_unique(expr))


def count_paths(expr: Expression) -> int:
    """
    Number of nodes a walk visits, i.e. the size of the graph unfolded
    into a tree. Grows exponentially with repeated sharing.
    """
    paths: Dict[int, int] = {}
    for current in iter_unique(expr):
        children = current.node.children()
        paths[current.id] = 1 + sum(paths[child.id] for child in children)
    return paths[expr.id]


def graph_depth(expr: Expression) -> int:
    """Longest root-to-leaf path counted in nodes; a single leaf has depth 1"""
    depths: Dict[int, int] = {}
    for current in iter_unique(expr):
        children = current.node.children()
        depths[current.id] = 1 + max((depths[child.id] for child in children), default=0)
    return depths[expr.id]


def collect_parameters(expr: Expression) -> Dict[int, str]:
    """Map of parameter index to the first name seen for it"""
    parameters: Dict[int, str] = {}
    for current in iter_unique(expr):
        node = current.node
        if isinstance(node, ParameterNode):
            parameters.setdefault(node.index, node.name)
    return parameters


def count_node_types(expr: Expression) -> Dict[NodeType, int]:
    """Distinct handle count per variant"""
    counts = {node_type: 0 for node_type in NodeType}
    for current in iter_unique(expr):
        counts[current.node_type] += 1
    return counts


class CallCounter(ExprVisitor[None]):
    """Records every callback in the order walk issues them"""

    def __init__(self):
        self.calls: List[Tuple] = []

    def count(self, callback: str) -> int:
        return sum(1 for call in self.calls if call[0] == callback)

    def on_constant(self, value: float) -> None:
        self.calls.append(('on_constant', value))

    def on_parameter(self, index: int, name: str) -> None:
        self.calls.append(('on_parameter', index, name))

    def on_add(self, lhs_result: None, rhs_result: None) -> None:
        self.calls.append(('on_add',))

    def on_mul(self, lhs_result: None, rhs_result: None) -> None:
        self.calls.append(('on_mul',))
