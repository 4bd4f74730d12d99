"""Visitor contract and post-order traversal over expression graphs.

A visitor supplies one callback per node variant. ``walk`` drives it:
leaves call their callback directly, binary nodes walk ``lhs`` fully,
then ``rhs`` fully, then combine both results. There is no memoisation,
so a sub-expression reachable along several paths is visited once per
path. Recursion depth equals the longest root-to-leaf path and is bounded
by the interpreter's recursion limit (see ``utils.recursion``).
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from .core.operators import NodeType
from .errors import IncompleteVisitorError

if TYPE_CHECKING:
  from .expression import Expression

T = TypeVar('T')

VISITOR_CALLBACKS = ('on_constant', 'on_parameter', 'on_add', 'on_mul')


class ExprVisitor(ABC, Generic[T]):
  """Interpreter over the closed variant set {Constant, Parameter, Add, Mul}.

  Coverage is checked when a subclass is defined: leaving out a callback
  raises IncompleteVisitorError at class creation. Intermediate bases that
  are meant to be completed later pass ``abstract=True``::

      class Partial(ExprVisitor[float], abstract=True):
        ...
  """

  def __init_subclass__(cls, abstract: bool = False, **kwargs):
    super().__init_subclass__(**kwargs)
    if abstract:
      return
    missing = [name for name in VISITOR_CALLBACKS
               if not callable(getattr(cls, name, None))
               or getattr(getattr(cls, name), '__isabstractmethod__', False)]
    if missing:
      raise IncompleteVisitorError(cls.__name__, missing)

  @abstractmethod
  def on_constant(self, value: float) -> T:
    pass

  @abstractmethod
  def on_parameter(self, index: int, name: str) -> T:
    pass

  @abstractmethod
  def on_add(self, lhs_result: T, rhs_result: T) -> T:
    pass

  @abstractmethod
  def on_mul(self, lhs_result: T, rhs_result: T) -> T:
    pass


def walk(expr: 'Expression', visitor: ExprVisitor[T]) -> T:
  node = expr.node
  node_type = node.node_type
  if node_type == NodeType.CONSTANT:
    return visitor.on_constant(node.value)
  elif node_type == NodeType.PARAMETER:
    return visitor.on_parameter(node.index, node.name)
  elif node_type == NodeType.ADD:
    lhs_result = walk(node.lhs, visitor)
    rhs_result = walk(node.rhs, visitor)
    return visitor.on_add(lhs_result, rhs_result)
  elif node_type == NodeType.MUL:
    lhs_result = walk(node.lhs, visitor)
    rhs_result = walk(node.rhs, visitor)
    return visitor.on_mul(lhs_result, rhs_result)
  raise TypeError(f"walk reached unexpected node {type(node).__name__}")
