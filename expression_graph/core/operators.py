import numpy as np
import numba
from enum import IntEnum


class NodeType(IntEnum):
  CONSTANT = 0
  PARAMETER = 1
  ADD = 2
  MUL = 3


OP_SYMBOLS = {NodeType.ADD: '+', NodeType.MUL: '*'}

# No fastmath: NaN and infinity must propagate per IEEE 754

@numba.njit(cache=True, inline='always')
def evaluate_parameter(X, column):
  return X[:, column].astype(np.float64)

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True)
def evaluate_add(left_val, right_val):
  return left_val + right_val

@numba.njit(cache=True)
def evaluate_mul(left_val, right_val):
  return left_val * right_val