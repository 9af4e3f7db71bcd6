# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest
from lark import Token, Tree

from decaf.ast import Binary, BoolConstant, FunctionCall, IntConstant, Location, Operator
from decaf.compiler import generate_expression
from decaf.errors import MalformedLiteralError, UnexpectedNodeError, UnsupportedOperatorError
from decaf.expressions import build_constant, build_expr
from decaf.parser import parse_tree


def test_binary_keeps_operand_order() -> None:
	expr = generate_expression("x + 3")
	assert expr == Binary(Location("x"), Operator.ADD, IntConstant(3))


def test_location() -> None:
	assert generate_expression("x") == Location("x")


def test_function_call_args_in_source_order() -> None:
	call = generate_expression("m(x,y)")
	assert isinstance(call, FunctionCall)
	assert call.name == "m"
	assert call.args == (Location("x"), Location("y"))


def test_function_call_without_args() -> None:
	assert generate_expression("tick()") == FunctionCall("tick", ())


def test_nested_call_arguments_are_built() -> None:
	call = generate_expression("f(g(1), a * 2)")
	assert call == FunctionCall(
		"f",
		(
			FunctionCall("g", (IntConstant(1),)),
			Binary(Location("a"), Operator.MUL, IntConstant(2)),
		),
	)


def test_int_constant() -> None:
	assert generate_expression("3") == IntConstant(3)


def test_negative_int_constant() -> None:
	assert generate_expression("-42") == IntConstant(-42)


def test_subtraction_is_not_a_negative_literal() -> None:
	assert generate_expression("x -1") == Binary(Location("x"), Operator.SUB, IntConstant(1))


def test_bool_constants() -> None:
	assert generate_expression("true") == BoolConstant(True)
	assert generate_expression("false") == BoolConstant(False)


def test_parentheses_leave_no_node() -> None:
	assert generate_expression("((x))") == Location("x")
	expr = generate_expression("a * (b + c)")
	assert expr == Binary(
		Location("a"),
		Operator.MUL,
		Binary(Location("b"), Operator.ADD, Location("c")),
	)


def test_multiplication_binds_tighter() -> None:
	expr = generate_expression("a + b * c")
	assert expr == Binary(
		Location("a"),
		Operator.ADD,
		Binary(Location("b"), Operator.MUL, Location("c")),
	)


def test_same_precedence_is_left_associative() -> None:
	expr = generate_expression("a - b - c")
	assert expr == Binary(
		Binary(Location("a"), Operator.SUB, Location("b")),
		Operator.SUB,
		Location("c"),
	)


def test_building_twice_gives_equal_trees() -> None:
	tree = parse_tree("f(a, 1) * (b - 2)", start="expr")
	assert build_expr(tree) == build_expr(tree)


@pytest.mark.parametrize("source, op", [
	("a / b", "/"),
	("a % b", "%"),
	("a < b", "<"),
	("a >= b", ">="),
	("a == b", "=="),
	("a != b", "!="),
	("a && b", "&&"),
	("a || b", "||"),
])
def test_unsupported_operators_are_rejected(source: str, op: str) -> None:
	with pytest.raises(UnsupportedOperatorError) as excinfo:
		generate_expression(source)
	assert excinfo.value.operator == op


def test_unsupported_operator_deep_in_tree() -> None:
	with pytest.raises(UnsupportedOperatorError):
		generate_expression("f(1 + (2 / x))")


def test_unsupported_operator_reports_location() -> None:
	with pytest.raises(UnsupportedOperatorError) as excinfo:
		generate_expression("a\n / b")
	assert excinfo.value.loc is not None
	assert excinfo.value.loc.line == 2
	assert str(excinfo.value).startswith("2:")


def test_int_literal_overflow() -> None:
	assert generate_expression("2147483647") == IntConstant(2147483647)
	assert generate_expression("-2147483648") == IntConstant(-2147483648)
	with pytest.raises(MalformedLiteralError):
		generate_expression("2147483648")
	with pytest.raises(MalformedLiteralError):
		generate_expression("-2147483649")


def test_non_numeric_int_literal() -> None:
	tree = Tree("constant", [Tree("literal", [Tree("number", [Token("NUMBER", "12a")])])])
	with pytest.raises(MalformedLiteralError):
		build_expr(tree)


def test_bool_literal_must_be_lowercase() -> None:
	with pytest.raises(MalformedLiteralError):
		build_constant(Tree("boolean", [Token("TRUE", "True")]))


def test_unknown_literal_kind() -> None:
	with pytest.raises(MalformedLiteralError):
		build_constant(Tree("literal", [Tree("string", [Token("STRING", '"hi"')])]))


def test_non_tree_expression_input() -> None:
	with pytest.raises(UnexpectedNodeError):
		build_expr(Token("NAME", "x"))


def test_unknown_expression_node() -> None:
	with pytest.raises(UnexpectedNodeError):
		build_expr(Tree("ternary", []))
