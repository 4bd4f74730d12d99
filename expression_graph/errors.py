"""Exception types raised by graph construction and interpretation."""


class ExpressionGraphError(Exception):
  """Base class for all expression graph errors"""


class ParameterUnbound(ExpressionGraphError, LookupError):
  """A parameter node was reached whose index has no value in the binding context."""

  def __init__(self, index: int, name: str):
    self.index = index
    self.name = name
    super().__init__(index, name)

  def __str__(self) -> str:
    return f"Parameter {self.index} ('{self.name}') not set"


class IdentifierExhausted(ExpressionGraphError, RuntimeError):
  """The identifier counter has no values left; ids are never wrapped."""

  def __init__(self, max_value: int):
    self.max_value = max_value
    super().__init__(max_value)

  def __str__(self) -> str:
    return f"Identifier counter exhausted at maximum value {self.max_value}"


class IncompleteVisitorError(ExpressionGraphError, TypeError):
  """A visitor class was defined without a callback for every node variant."""

  def __init__(self, visitor_name: str, missing):
    self.visitor_name = visitor_name
    self.missing = tuple(missing)
    super().__init__(visitor_name, self.missing)

  def __str__(self) -> str:
    return f"Visitor {self.visitor_name} is missing callbacks: {', '.join(self.missing)}"
