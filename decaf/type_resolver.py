# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Map a `type` parse-tree node to the closed `Type` enumeration."""

from __future__ import annotations

from typing import Dict

from lark import Token, Tree

from ._tree import _loc, _name
from .ast import Type
from .errors import UnrecognizedTypeError

_TYPE_TOKENS: Dict[str, Type] = {
	"INT": Type.INT,
	"BOOL": Type.BOOL,
	"VOID": Type.VOID,
}


def resolve_type(node: Tree) -> Type:
	if _name(node) == "type":
		for child in node.children:
			if isinstance(child, Token) and child.type in _TYPE_TOKENS:
				return _TYPE_TOKENS[child.type]
	raise UnrecognizedTypeError(f"unrecognized type node: {node!r}", loc=_loc(node))
