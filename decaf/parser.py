# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parse tree provider.

Decaf source is parsed by lark from `grammar.lark`. The resulting trees name
every statement and expression alternative (see the `->` aliases in the
grammar), which is all the AST builders rely on. Syntax errors are raised by
lark as `UnexpectedInput` and are not translated here.
"""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Tree

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

START_SYMBOLS = ("program", "expr", "stmt")

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start=list(START_SYMBOLS),
	propagate_positions=True,
	maybe_placeholders=False,
)


def parse_tree(source: str, start: str = "program") -> Tree:
	if start not in START_SYMBOLS:
		raise ValueError(f"unknown start symbol '{start}', expected one of {START_SYMBOLS}")
	return _PARSER.parse(source, start=start)
