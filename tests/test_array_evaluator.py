import logging

import numpy as np
import pytest

from expression_graph import (
    ArrayEvaluator, LogLevel, ParameterUnbound, configure_logging, constant, evaluate, evaluate_array, parameter,
)


def test_matches_scalar_evaluation_row_by_row(samples):
    x = parameter(0, "x")
    y = parameter(1, "y")
    z = parameter(2, "z")
    expr = (x + 2.0) * y + z * z

    result = evaluate_array(expr, samples)
    assert result.shape == (samples.shape[0],)
    assert result.dtype == np.float64
    for row, value in zip(samples, result):
        assert value == pytest.approx(evaluate(expr, {0: row[0], 1: row[1], 2: row[2]}))


def test_constant_expression_broadcasts(samples):
    result = evaluate_array(constant(1.5) * 2.0, samples)
    np.testing.assert_array_equal(result, np.full(samples.shape[0], 3.0))


def test_one_dimensional_input_is_a_single_column():
    result = evaluate_array(parameter(0, "x") * 3.0, np.array([1.0, 2.0, 3.0]))
    np.testing.assert_array_equal(result, [3.0, 6.0, 9.0])


def test_column_map_redirects_parameters(samples):
    expr = parameter(10, "a") + parameter(20, "b")
    result = evaluate_array(expr, samples, column_map={10: 2, 20: 0})
    np.testing.assert_allclose(result, samples[:, 2] + samples[:, 0])


def test_missing_column_raises_parameter_unbound(samples):
    with pytest.raises(ParameterUnbound) as excinfo:
        evaluate_array(parameter(5, "w"), samples)
    assert excinfo.value.index == 5

    with pytest.raises(ParameterUnbound):
        evaluate_array(parameter(0, "x"), samples, column_map={1: 0})


def test_non_finite_values_are_not_sanitised():
    X = np.array([[np.nan], [np.inf], [1.0]])
    result = evaluate_array(parameter(0, "x") * 2.0, X)
    assert np.isnan(result[0])
    assert result[1] == np.inf
    assert result[2] == 2.0


def test_rejects_higher_dimensional_input():
    with pytest.raises(ValueError):
        ArrayEvaluator(np.zeros((2, 2, 2)))


def test_evaluation_logged_at_verbose(samples, caplog):
    caplog.set_level(logging.DEBUG, logger='expression_graph')
    configure_logging(LogLevel.VERBOSE)
    evaluate_array(parameter(0, "x") + 1.0, samples)
    assert any("over 100 samples" in r.getMessage() for r in caplog.records)
