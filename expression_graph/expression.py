import numbers
from typing import Optional, Union, TypeVar

from .core.identifiers import ExprId, IdGenerator, get_global_generator
from .core.node import Node, ConstantNode, ParameterNode, AddNode, MulNode
from .core.operators import NodeType
from .visitor import ExprVisitor, walk

T = TypeVar('T')

Operand = Union['Expression', float, int]


class Expression:
  """Immutable handle pairing a unique identifier with a shared node.

  Handles may be reused as children of any number of later expressions;
  since a node can only reference handles that already exist, the graph
  is always acyclic.
  """

  __slots__ = ('_node', '_id')

  def __init__(self, node: Node, generator: Optional[IdGenerator] = None):
    if not isinstance(node, Node):
      raise TypeError(f"expected a Node, got {type(node).__name__}")
    if generator is None:
      generator = get_global_generator()
    object.__setattr__(self, '_node', node)
    object.__setattr__(self, '_id', generator.next_id())

  def __setattr__(self, name, value):
    raise AttributeError("Expression is immutable")

  def __delattr__(self, name):
    raise AttributeError("Expression is immutable")

  @property
  def node(self) -> Node:
    return self._node

  @property
  def id(self) -> ExprId:
    return self._id

  @property
  def node_type(self) -> NodeType:
    return self._node.node_type

  def walk(self, visitor: ExprVisitor[T]) -> T:
    return walk(self, visitor)

  def to_string(self) -> str:
    from .visitors.formatter import StringFormatter
    return walk(self, StringFormatter())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression(id={int(self._id)}, node={self._node!r})"

  def __add__(self, other: Operand) -> 'Expression':
    if not _is_operand(other):
      return NotImplemented
    return add(self, other)

  def __radd__(self, other: Operand) -> 'Expression':
    if not _is_operand(other):
      return NotImplemented
    return add(other, self)

  def __mul__(self, other: Operand) -> 'Expression':
    if not _is_operand(other):
      return NotImplemented
    return mul(self, other)

  def __rmul__(self, other: Operand) -> 'Expression':
    if not _is_operand(other):
      return NotImplemented
    return mul(other, self)

  def __hash__(self) -> int:
    return hash(self._id)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self._id == other._id

  def __copy__(self) -> 'Expression':
    return self

  def __deepcopy__(self, memo) -> 'Expression':
    return self


def _is_operand(value) -> bool:
  return isinstance(value, Expression) or (isinstance(value, numbers.Real) and not isinstance(value, bool))


def as_expression(value: Operand, generator: Optional[IdGenerator] = None) -> Expression:
  """Return value unchanged if it is a handle, otherwise wrap a real number as a constant"""
  if isinstance(value, Expression):
    return value
  if _is_operand(value):
    return constant(float(value), generator=generator)
  raise TypeError(f"cannot use {type(value).__name__} as an expression operand")


def constant(value: float, *, generator: Optional[IdGenerator] = None) -> Expression:
  # NaN and infinities are legal payloads; consumers decide what to reject
  return Expression(ConstantNode(value), generator)


def parameter(index: int, name: str, *, generator: Optional[IdGenerator] = None) -> Expression:
  return Expression(ParameterNode(index, name), generator)


def add(lhs: Operand, rhs: Operand, *, generator: Optional[IdGenerator] = None) -> Expression:
  lhs = as_expression(lhs, generator)
  rhs = as_expression(rhs, generator)
  return Expression(AddNode(lhs, rhs), generator)


def mul(lhs: Operand, rhs: Operand, *, generator: Optional[IdGenerator] = None) -> Expression:
  lhs = as_expression(lhs, generator)
  rhs = as_expression(rhs, generator)
  return Expression(MulNode(lhs, rhs), generator)
