# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
decaf: front end for the Decaf teaching language.

Source text is parsed by lark (`parser`) and turned into an immutable AST
(`ast`) by the builders in `program`, `statements`, `expressions` and
`type_resolver`. `compiler.generate_ast` ties the two together.
"""

from .compiler import generate_ast, generate_expression, generate_statement

__all__ = ["generate_ast", "generate_expression", "generate_statement"]
