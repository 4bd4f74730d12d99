"""Numeric interpreters for expression graphs."""

from .evaluator import NumericEvaluator, evaluate
from .array_evaluator import ArrayEvaluator, evaluate_array

__all__ = ['NumericEvaluator', 'evaluate', 'ArrayEvaluator', 'evaluate_array']
