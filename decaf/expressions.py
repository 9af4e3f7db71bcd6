# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Expression builder.

Turns the expression alternatives of the grammar into AST expressions:

- `binary_operation` -> `Binary`, left operand built before the right,
- `fun_call_expression` -> `FunctionCall`,
- `constant` -> `IntConstant` / `BoolConstant`,
- `expression` (parenthesised) -> whatever the inner expression builds; grouping
  shows up only in the shape of the tree,
- `location` -> `Location`.

Every function here reads one node and returns a new value; nothing is shared
between calls.
"""

from __future__ import annotations

from typing import Dict, List

from lark import Token, Tree

from ._tree import _child_named, _ident_text, _loc, _name, _subtrees
from .ast import (
	Binary,
	BoolConstant,
	Expression,
	FunctionCall,
	IntConstant,
	Location,
	Operator,
)
from .errors import MalformedLiteralError, UnexpectedNodeError, UnsupportedOperatorError

# Integer constants are 32-bit signed.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_OPERATOR_TOKENS: Dict[str, Operator] = {
	"ADD": Operator.ADD,
	"SUB": Operator.SUB,
	"MUL": Operator.MUL,
}

_BOOL_SPELLINGS: Dict[str, bool] = {
	"true": True,
	"false": False,
}


def build_expr(node: Tree) -> Expression:
	if not isinstance(node, Tree):
		raise UnexpectedNodeError(f"expected expression tree, got {node!r}", loc=_loc(node))
	kind = _name(node)
	if kind == "binary_operation":
		return build_binary(node)
	if kind == "fun_call_expression":
		return build_function_call(node.children[0])
	if kind == "constant":
		return build_constant(node.children[0])
	if kind == "expression":
		# ( expr ): no node of its own, pass straight through to the inner expr
		return build_expr(node.children[0])
	if kind == "location":
		return build_location(node.children[0])
	raise UnexpectedNodeError(f"unsupported expression node: {kind}", loc=_loc(node))


def build_binary(tree: Tree) -> Binary:
	left_node, op_node, right_node = tree.children
	left = build_expr(left_node)
	op = resolve_operator(op_node)
	right = build_expr(right_node)
	return Binary(left=left, op=op, right=right)


def resolve_operator(node: Tree) -> Operator:
	token = node.children[0] if isinstance(node, Tree) else node
	if not isinstance(token, Token):
		raise UnexpectedNodeError(f"operator node without token: {node!r}", loc=_loc(node))
	op = _OPERATOR_TOKENS.get(token.type)
	if op is None:
		raise UnsupportedOperatorError(token.value, loc=_loc(token))
	return op


def build_function_call(tree: Tree) -> FunctionCall:
	name = _ident_text(tree)
	args: List[Expression] = []
	args_node = _child_named(tree, "args")
	if args_node is not None:
		args = [build_expr(arg) for arg in _subtrees(args_node)]
	return FunctionCall(name=name, args=tuple(args))


def build_constant(tree: Tree) -> Expression:
	literal = tree.children[0] if _name(tree) == "literal" else tree
	kind = _name(literal)
	if kind == "number":
		return IntConstant(value=parse_int(literal))
	if kind == "boolean":
		return BoolConstant(value=parse_bool(literal))
	raise MalformedLiteralError(f"unknown literal kind: {kind}", loc=_loc(literal))


def parse_int(tree: Tree) -> int:
	text = "".join(tok.value for tok in tree.children if isinstance(tok, Token))
	digits = text[1:] if text.startswith("-") else text
	if not digits.isdigit() or not digits.isascii():
		raise MalformedLiteralError(f"malformed integer literal '{text}'", loc=_loc(tree))
	value = int(text, 10)
	if value < INT_MIN or value > INT_MAX:
		raise MalformedLiteralError(f"integer literal '{text}' out of range", loc=_loc(tree))
	return value


def parse_bool(tree: Tree) -> bool:
	text = "".join(tok.value for tok in tree.children if isinstance(tok, Token))
	if text not in _BOOL_SPELLINGS:
		raise MalformedLiteralError(f"malformed boolean literal '{text}'", loc=_loc(tree))
	return _BOOL_SPELLINGS[text]


def build_location(tree: Tree) -> Location:
	return Location(name=_ident_text(tree))
