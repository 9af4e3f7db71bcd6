# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Errors raised while building the AST from a lark parse tree.

All of them are fatal: the build is abandoned and no partial tree is returned.
Syntax errors are not in this family; they surface as lark's
`UnexpectedInput` before the builders run.
"""

from __future__ import annotations

from typing import Optional

from .ast import Located


class AstBuildError(ValueError):
	"""Base class for parse-tree to AST failures."""

	def __init__(self, message: str, *, loc: Optional[Located] = None) -> None:
		super().__init__(message)
		self.message = message
		self.loc = loc

	def __str__(self) -> str:
		if self.loc is None:
			return self.message
		return f"{self.loc}: {self.message}"


class UnrecognizedTypeError(AstBuildError):
	"""Type annotation is none of int/bool/void."""


class UnsupportedOperatorError(AstBuildError):
	"""
	Operator the grammar accepts but the AST cannot represent.

	Only `+`, `-` and `*` have an `Operator`; division, comparison and logical
	operators land here.
	"""

	def __init__(self, operator: str, *, loc: Optional[Located] = None) -> None:
		super().__init__(f"unsupported operator '{operator}'", loc=loc)
		self.operator = operator


class MalformedLiteralError(AstBuildError):
	"""Literal text that cannot be read as its declared kind."""


class UnexpectedNodeError(AstBuildError):
	"""Parse-tree node the builders do not know how to translate."""
