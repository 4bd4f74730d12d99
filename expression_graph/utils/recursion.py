import sys
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..logging_system import log_debug

_LIMIT_LOCK = threading.Lock()
# Limits requested by blocks still open, across all threads
_ACTIVE_LIMITS: List[int] = []
# Interpreter limit from before the first open block
_BASE_LIMIT: Optional[int] = None


@contextmanager
def recursion_limit(limit: int) -> Iterator[int]:
  """Temporarily raise the interpreter recursion limit for walking deep graphs.

  The limit is never lowered. While blocks overlap, in one thread or many,
  the interpreter limit stays at the largest limit any open block asked
  for; the original value comes back when the last block exits. A deep
  enough walk can still exhaust the native C stack.
  """
  global _BASE_LIMIT
  with _LIMIT_LOCK:
    if not _ACTIVE_LIMITS:
      _BASE_LIMIT = sys.getrecursionlimit()
    _ACTIVE_LIMITS.append(limit)
    active = max(_BASE_LIMIT, *_ACTIVE_LIMITS)
    if active > sys.getrecursionlimit():
      log_debug(f"raising recursion limit {sys.getrecursionlimit()} -> {active}")
      sys.setrecursionlimit(active)
  try:
    yield active
  finally:
    with _LIMIT_LOCK:
      _ACTIVE_LIMITS.remove(limit)
      restored = max(_BASE_LIMIT, *_ACTIVE_LIMITS)
      sys.setrecursionlimit(restored)
      if not _ACTIVE_LIMITS:
        _BASE_LIMIT = None
