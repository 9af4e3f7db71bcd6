# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Decaf front end entry points: source text in, immutable AST out.

`generate_ast` handles a whole compilation unit; the expression and statement
variants parse from the corresponding grammar start symbol and are mostly
useful for tests and tooling.
"""

from __future__ import annotations

import logging

from .ast import Expression, Program, Statement
from .expressions import build_expr
from .parser import parse_tree
from .program import build_program
from .statements import build_stmt

logger: logging.Logger = logging.getLogger(__name__)


def generate_ast(source: str) -> Program:
	tree = parse_tree(source, start="program")
	logger.debug("parsed compilation unit (%d chars)", len(source))
	return build_program(tree)


def generate_expression(source: str) -> Expression:
	return build_expr(parse_tree(source, start="expr"))


def generate_statement(source: str) -> Statement:
	return build_stmt(parse_tree(source, start="stmt"))
