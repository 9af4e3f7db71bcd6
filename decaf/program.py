# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Assemble the `Program` root from a parsed compilation unit."""

from __future__ import annotations

import logging
from typing import List

from lark import Tree

from ._tree import _child_named, _ident_text, _loc, _name, _subtrees
from .ast import Function, Program, Variable
from .errors import UnexpectedNodeError
from .statements import build_variable, read_block
from .type_resolver import resolve_type

logger: logging.Logger = logging.getLogger(__name__)


def build_program(tree: Tree) -> Program:
	if _name(tree) != "program":
		raise UnexpectedNodeError(f"expected program, got {_name(tree)}", loc=_loc(tree))
	variables: List[Variable] = []
	functions: List[Function] = []
	for child in _subtrees(tree):
		kind = _name(child)
		if kind == "var_decl":
			variables.append(build_variable(child))
		elif kind == "func_decl":
			functions.append(build_function(child))
		else:
			raise UnexpectedNodeError(f"unexpected top-level node: {kind}", loc=_loc(child))
	logger.debug("assembled program: %d globals, %d functions", len(variables), len(functions))
	return Program(variables=tuple(variables), functions=tuple(functions))


def build_function(tree: Tree) -> Function:
	return_type = resolve_type(_child_named(tree, "type"))
	# identifier token only, never the text of the whole declaration
	name = _ident_text(tree)
	params: List[Variable] = []
	params_node = _child_named(tree, "params")
	if params_node is not None:
		params = [build_param(p) for p in _subtrees(params_node)]
	body = _child_named(tree, "block")
	if body is None:
		raise UnexpectedNodeError(f"function {name} missing body", loc=_loc(tree))
	return Function(type=return_type, name=name, params=tuple(params), block=read_block(body))


def build_param(tree: Tree) -> Variable:
	return Variable(name=_ident_text(tree), type=resolve_type(_child_named(tree, "type")))
