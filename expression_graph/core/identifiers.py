from typing import Optional
import threading

from ..errors import IdentifierExhausted
from ..logging_system import get_logger

# Identifiers are unsigned 64-bit values
MAX_ID = 2 ** 64 - 1


class ExprId(int):
  """Process-local identifier of an expression handle. Not stable across runs."""

  __slots__ = ()

  def __repr__(self) -> str:
    return f"ExprId({int(self)})"


class IdGenerator:
  """Thread-safe monotonically increasing identifier counter"""

  def __init__(self, start: int = 0, max_value: int = MAX_ID):
    if start < 0:
      raise ValueError(f"start must be non-negative, got {start}")
    if max_value < start:
      raise ValueError(f"max_value {max_value} is below start {start}")
    self._next = start
    self._max_value = max_value
    self._lock = threading.Lock()

  @property
  def max_value(self) -> int:
    return self._max_value

  def next_id(self) -> ExprId:
    with self._lock:
      value = self._next
      if value > self._max_value:
        get_logger().critical(f"identifier counter passed {self._max_value}")
        raise IdentifierExhausted(self._max_value)
      self._next = value + 1
    return ExprId(value)

  def peek(self) -> int:
    """Value the next call to next_id would return"""
    with self._lock:
      return self._next


# Global instance - created lazily, replaceable for tests
_GLOBAL_GENERATOR: Optional[IdGenerator] = None
_GENERATOR_LOCK = threading.Lock()


def get_global_generator() -> IdGenerator:
  """Get the process-wide generator, creating it on first use"""
  global _GLOBAL_GENERATOR

  # Fast path - no locking needed once initialized
  generator = _GLOBAL_GENERATOR
  if generator is not None:
    return generator

  with _GENERATOR_LOCK:
    if _GLOBAL_GENERATOR is None:
      _GLOBAL_GENERATOR = IdGenerator()
    return _GLOBAL_GENERATOR


def set_global_generator(generator: IdGenerator) -> IdGenerator:
  """Install a generator as the process-wide default, returning the previous one.

  The new generator must not start below the previous one's next value,
  so handles built before and after the swap never collide.
  """
  global _GLOBAL_GENERATOR
  previous = get_global_generator()
  if generator.peek() < previous.peek():
    raise ValueError(
      f"generator starts at {generator.peek()}, ids up to {previous.peek() - 1} are already issued")
  with _GENERATOR_LOCK:
    _GLOBAL_GENERATOR = generator
  return previous


def next_id() -> ExprId:
  return get_global_generator().next_id()


def reset_global_generator() -> IdGenerator:
  """Install a fresh process-wide generator with the default maximum.

  The fresh generator continues from the previous one's next value, so no
  id is ever issued twice. Not meant to run while other threads are
  building expressions.
  """
  global _GLOBAL_GENERATOR
  previous = get_global_generator()
  with _GENERATOR_LOCK, previous._lock:
    start = previous._next
    _GLOBAL_GENERATOR = IdGenerator(start=start, max_value=max(start, MAX_ID))
    return _GLOBAL_GENERATOR
