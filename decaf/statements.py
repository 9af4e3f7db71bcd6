# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Statement and block builder.

Statement nodes arrive under their grammar alias (`assign`, `if_stmt`,
`while_stmt`, ...) and map one-to-one onto the statement variants, except for
else-if chains, which are folded into nested `IfElse` values.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from lark import Tree

from ._tree import _child_named, _children_named, _ident_text, _loc, _name, _subtrees
from .ast import (
	Assignment,
	Block,
	Break,
	Continue,
	EMPTY_BLOCK,
	Expression,
	IfElse,
	Location,
	Return,
	ReturnVoid,
	Statement,
	Variable,
	VoidFunctionCall,
	While,
)
from .errors import UnexpectedNodeError
from .expressions import build_expr, build_function_call
from .type_resolver import resolve_type


def build_stmt(tree: Tree) -> Statement:
	kind = _name(tree)
	if kind == "assign":
		return _build_assign(tree)
	if kind == "void_function_call":
		return VoidFunctionCall(call=build_function_call(tree.children[0]))
	if kind == "if_stmt":
		return _build_if(tree)
	if kind == "while_stmt":
		cond_node, body_node = tree.children
		return While(cond=build_expr(cond_node), block=read_block(body_node))
	if kind == "return_stmt":
		return Return(value=build_expr(tree.children[0]))
	if kind == "return_void":
		return ReturnVoid()
	if kind == "break_stmt":
		return Break()
	if kind == "continue_stmt":
		return Continue()
	raise UnexpectedNodeError(f"unsupported statement node: {kind}", loc=_loc(tree))


def _build_assign(tree: Tree) -> Assignment:
	loc_node, value_node = tree.children
	target = Location(name=_ident_text(loc_node))
	value = build_expr(value_node)
	return Assignment(target=target, value=value)


def _build_if(tree: Tree) -> IfElse:
	cond_node, then_node = tree.children[0], tree.children[1]
	cond = build_expr(cond_node)
	then_block = read_block(then_node)

	branches: List[Tuple[Expression, Block]] = []
	for clause in _children_named(tree, "else_if_clause"):
		elif_cond, elif_body = clause.children
		branches.append((build_expr(elif_cond), read_block(elif_body)))

	else_clause = _child_named(tree, "else_clause")
	tail = read_block(else_clause.children[0]) if else_clause is not None else EMPTY_BLOCK

	# else if a {A} else if b {B} else {C}  ==>  else { if a {A} else { if b {B} else {C} } }
	for elif_cond, elif_block in reversed(branches):
		tail = Block(vars=(), stmts=(IfElse(cond=elif_cond, if_block=elif_block, else_block=tail),))
	return IfElse(cond=cond, if_block=then_block, else_block=tail)


def read_block(tree: Tree) -> Block:
	"""Split a block's children into local declarations and statements, each in source order."""
	if _name(tree) != "block":
		raise UnexpectedNodeError(f"expected block, got {_name(tree)}", loc=_loc(tree))
	variables: List[Variable] = []
	stmts: List[Statement] = []
	for child in _subtrees(tree):
		if _name(child) == "var_decl":
			variables.append(build_variable(child))
		else:
			stmts.append(build_stmt(child))
	return Block(vars=tuple(variables), stmts=tuple(stmts))


def build_variable(tree: Tree) -> Variable:
	"""`type ident (= expr)?` as written at global or block scope."""
	type_node = _child_named(tree, "type")
	if type_node is None:
		raise UnexpectedNodeError("declaration missing type", loc=_loc(tree))
	initializer: Optional[Expression] = None
	rest = [child for child in _subtrees(tree) if _name(child) not in {"type", "ident"}]
	if rest:
		initializer = build_expr(rest[0])
	return Variable(name=_ident_text(tree), type=resolve_type(type_node), initializer=initializer)
