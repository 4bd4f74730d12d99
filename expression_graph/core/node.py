import numbers
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Tuple

from .operators import NodeType, OP_SYMBOLS

if TYPE_CHECKING:
  from ..expression import Expression

# Parameter indices live in the unsigned 32-bit range
MAX_PARAMETER_INDEX = 2 ** 32 - 1


class Node(ABC):
  """Immutable payload of an expression handle.

  The variant set is closed: ConstantNode, ParameterNode, AddNode, MulNode.
  Every visitor has one callback per variant, so a new variant means
  revisiting every visitor.
  """

  __slots__ = ()

  node_type: NodeType

  def _init_field(self, name: str, value):
    object.__setattr__(self, name, value)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @abstractmethod
  def children(self) -> Tuple['Expression', ...]:
    pass

  def is_leaf(self) -> bool:
    return not self.children()


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
      raise TypeError(f"constant value must be a real number, got {type(value).__name__}")
    self._init_field('value', float(value))

  def children(self) -> Tuple['Expression', ...]:
    return ()

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"


class ParameterNode(Node):
  """Placeholder resolved through a binding context by index; name is for diagnostics"""

  __slots__ = ('index', 'name')

  node_type = NodeType.PARAMETER

  def __init__(self, index: int, name: str):
    if isinstance(index, bool) or not isinstance(index, int):
      raise TypeError(f"parameter index must be an int, got {type(index).__name__}")
    if not 0 <= index <= MAX_PARAMETER_INDEX:
      raise ValueError(f"parameter index {index} outside [0, {MAX_PARAMETER_INDEX}]")
    self._init_field('index', index)
    self._init_field('name', str(name))

  def children(self) -> Tuple['Expression', ...]:
    return ()

  def __repr__(self) -> str:
    return f"ParameterNode({self.index}, {self.name!r})"


class BinaryOpNode(Node):
  __slots__ = ('lhs', 'rhs')

  def __init__(self, lhs: 'Expression', rhs: 'Expression'):
    self._init_field('lhs', lhs)
    self._init_field('rhs', rhs)

  @property
  def operator(self) -> str:
    return OP_SYMBOLS[self.node_type]

  def children(self) -> Tuple['Expression', ...]:
    return (self.lhs, self.rhs)

  def __repr__(self) -> str:
    return f"{type(self).__name__}(lhs=#{int(self.lhs.id)}, rhs=#{int(self.rhs.id)})"


class AddNode(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.ADD


class MulNode(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.MUL
