# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Decaf AST.

Every node is a frozen dataclass and every sequence is a tuple, so a tree is
immutable once built. Statements and expressions are closed unions: the
`Statement` and `Expression` aliases list every variant, and nothing else is
produced by the builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class Type(str, Enum):
	INT = "int"
	BOOL = "bool"
	VOID = "void"


class Operator(str, Enum):
	ADD = "+"
	SUB = "-"
	MUL = "*"


# --- expressions ---------------------------------------------------------


@dataclass(frozen=True)
class Binary:
	left: "Expression"
	op: Operator
	right: "Expression"


@dataclass(frozen=True)
class IntConstant:
	value: int


@dataclass(frozen=True)
class BoolConstant:
	value: bool


@dataclass(frozen=True)
class Location:
	"""Named variable or parameter reference (lvalue or rvalue)."""

	name: str


@dataclass(frozen=True)
class FunctionCall:
	name: str
	args: Tuple["Expression", ...] = ()


Expression = Union[Binary, IntConstant, BoolConstant, Location, FunctionCall]
EXPRESSION_TYPES = (Binary, IntConstant, BoolConstant, Location, FunctionCall)


# --- declarations and blocks ---------------------------------------------


@dataclass(frozen=True)
class Variable:
	name: str
	type: Type
	# Initializer written at the declaration (`int x = 1;`), if any.
	initializer: Optional[Expression] = None


@dataclass(frozen=True)
class Block:
	vars: Tuple[Variable, ...] = ()
	stmts: Tuple["Statement", ...] = ()


EMPTY_BLOCK = Block()


# --- statements ----------------------------------------------------------


@dataclass(frozen=True)
class Assignment:
	target: Location
	value: Expression


@dataclass(frozen=True)
class VoidFunctionCall:
	"""A call evaluated for its effect; the result, if any, is dropped."""

	call: FunctionCall


@dataclass(frozen=True)
class IfElse:
	cond: Expression
	if_block: Block
	# Never None: a missing `else` is an empty block.
	else_block: Block = EMPTY_BLOCK


@dataclass(frozen=True)
class While:
	cond: Expression
	block: Block


@dataclass(frozen=True)
class Return:
	value: Expression


@dataclass(frozen=True)
class ReturnVoid:
	pass


@dataclass(frozen=True)
class Break:
	pass


@dataclass(frozen=True)
class Continue:
	pass


Statement = Union[Assignment, VoidFunctionCall, IfElse, While, Return, ReturnVoid, Break, Continue]
STATEMENT_TYPES = (Assignment, VoidFunctionCall, IfElse, While, Return, ReturnVoid, Break, Continue)


# --- top level -----------------------------------------------------------


@dataclass(frozen=True)
class Function:
	type: Type
	name: str
	params: Tuple[Variable, ...]
	block: Block


@dataclass(frozen=True)
class Program:
	variables: Tuple[Variable, ...] = ()
	functions: Tuple[Function, ...] = ()


@dataclass(frozen=True)
class Located:
	line: int
	column: int

	def __str__(self) -> str:
		return f"{self.line}:{self.column}"
