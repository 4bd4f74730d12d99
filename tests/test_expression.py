import copy
import math

import numpy as np
import pytest

from expression_graph import (
    AddNode, ConstantNode, Expression, MulNode, NodeType, ParameterNode,
    add, as_expression, constant, mul, parameter,
)


def test_constant_payload(generator):
    expr = constant(2.5, generator=generator)
    assert isinstance(expr.node, ConstantNode)
    assert expr.node.value == 2.5
    assert expr.node_type == NodeType.CONSTANT
    assert expr.node.is_leaf()


def test_builders_accept_non_finite_constants(generator):
    assert math.isnan(constant(float('nan'), generator=generator).node.value)
    assert constant(float('inf'), generator=generator).node.value == float('inf')
    assert constant(float('-inf'), generator=generator).node.value == float('-inf')


def test_parameter_payload(generator):
    x = parameter(3, "x", generator=generator)
    assert isinstance(x.node, ParameterNode)
    assert x.node.index == 3
    assert x.node.name == "x"
    assert x.node_type == NodeType.PARAMETER


def test_parameter_index_must_be_uint32(generator):
    parameter(2 ** 32 - 1, "max", generator=generator)
    with pytest.raises(ValueError):
        parameter(-1, "neg", generator=generator)
    with pytest.raises(ValueError):
        parameter(2 ** 32, "big", generator=generator)
    with pytest.raises(TypeError):
        parameter(1.5, "float", generator=generator)
    with pytest.raises(TypeError):
        parameter(True, "flag", generator=generator)


def test_binary_builders_reference_children(generator):
    a = constant(2.0, generator=generator)
    b = constant(3.0, generator=generator)
    s = add(a, b, generator=generator)
    p = mul(a, b, generator=generator)
    assert isinstance(s.node, AddNode)
    assert isinstance(p.node, MulNode)
    assert s.node.lhs is a and s.node.rhs is b
    assert p.node.children() == (a, b)
    assert s.node.operator == '+'
    assert p.node.operator == '*'
    assert len({a.id, b.id, s.id, p.id}) == 4


def test_children_are_created_before_parents(generator):
    a = constant(1.0, generator=generator)
    b = constant(2.0, generator=generator)
    s = add(a, b, generator=generator)
    assert s.id > a.id and s.id > b.id


def test_infix_sugar_maps_to_builders():
    x = parameter(0, "x")
    expr = x + 2.0
    assert isinstance(expr.node, AddNode)
    assert expr.node.lhs is x
    assert isinstance(expr.node.rhs.node, ConstantNode)
    assert expr.node.rhs.node.value == 2.0

    flipped = 2.0 + x
    assert flipped.node.rhs is x
    assert flipped.node.lhs.node.value == 2.0

    product = 3 * x
    assert isinstance(product.node, MulNode)
    assert product.node.lhs.node.value == 3.0
    assert isinstance(product.node.lhs.node.value, float)


def test_numpy_scalars_convert_to_constants():
    expr = as_expression(np.float64(1.25))
    assert expr.node.value == 1.25
    assert as_expression(np.int64(4)).node.value == 4.0


def test_invalid_operands_are_rejected():
    x = parameter(0, "x")
    with pytest.raises(TypeError):
        x + "y"
    with pytest.raises(TypeError):
        add(x, None)
    with pytest.raises(TypeError):
        mul(x, True)
    with pytest.raises(TypeError):
        Expression("not a node")


def test_expressions_are_immutable(generator):
    a = constant(1.0, generator=generator)
    s = add(a, a, generator=generator)
    with pytest.raises(AttributeError):
        a.node.value = 5.0
    with pytest.raises(AttributeError):
        s.node.lhs = constant(3.0, generator=generator)
    with pytest.raises(AttributeError):
        s._node = a.node
    with pytest.raises(AttributeError):
        del a.node.value
    assert a.node.value == 1.0


def test_shared_sub_expression_is_one_object(generator):
    shared = constant(1.0, generator=generator)
    left = add(shared, constant(2.0, generator=generator), generator=generator)
    right = mul(shared, shared, generator=generator)
    root = add(left, right, generator=generator)
    assert root.node.lhs.node.lhs is root.node.rhs.node.lhs is root.node.rhs.node.rhs


def test_copy_returns_same_handle(generator):
    a = constant(1.0, generator=generator)
    assert copy.copy(a) is a
    assert copy.deepcopy(add(a, a, generator=generator)).node.lhs is a


def test_equality_and_hash_follow_identifier(generator):
    a = constant(1.0, generator=generator)
    b = constant(1.0, generator=generator)
    assert a == a
    assert a != b
    assert len({a, b, a}) == 2


def test_parameter_name_is_not_part_of_equality(generator):
    x1 = parameter(0, "x", generator=generator)
    x2 = parameter(0, "x", generator=generator)
    assert x1 != x2


def test_string_rendering():
    x = parameter(0, "x")
    y = parameter(1, "")
    expr = (x + 2.0) * y
    assert str(expr) == "((x + 2.000) * p1)"
    assert "AddNode" not in str(expr)
    assert repr(x).startswith("Expression(id=")
    assert "ParameterNode(0, 'x')" in repr(x)


def test_constant_rejects_non_numeric_values(generator):
    with pytest.raises(TypeError):
        constant("1.5", generator=generator)
    with pytest.raises(TypeError):
        constant("nan", generator=generator)
    with pytest.raises(TypeError):
        constant(True, generator=generator)
    assert constant(np.float32(0.5), generator=generator).node.value == 0.5
    assert constant(3, generator=generator).node.value == 3.0
