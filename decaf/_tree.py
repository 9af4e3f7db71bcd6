# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Small helpers for reading lark trees, shared by the builders."""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

from lark import Token, Tree

from .ast import Located
from .errors import UnexpectedNodeError

Node = Union[Tree, Token]


def _name(node: Node) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


def _loc(node: Optional[Node]) -> Optional[Located]:
	if not isinstance(node, (Tree, Token)):
		return None
	if isinstance(node, Token):
		if node.line is None:
			return None
		return Located(line=node.line, column=node.column)
	meta = node.meta
	if getattr(meta, "empty", True):
		return None
	return Located(line=meta.line, column=meta.column)


def _subtrees(tree: Tree) -> List[Tree]:
	return [child for child in tree.children if isinstance(child, Tree)]


def _children_named(tree: Tree, name: str) -> Iterator[Tree]:
	for child in tree.children:
		if isinstance(child, Tree) and _name(child) == name:
			yield child


def _child_named(tree: Tree, name: str) -> Optional[Tree]:
	return next(_children_named(tree, name), None)


def _ident_text(tree: Tree) -> str:
	"""Text of the identifier directly under `tree` (an `ident` child or NAME token)."""
	if _name(tree) == "ident":
		return tree.children[0].value
	for child in tree.children:
		if isinstance(child, Tree) and _name(child) == "ident":
			return child.children[0].value
		if isinstance(child, Token) and child.type == "NAME":
			return child.value
	raise UnexpectedNodeError(f"{_name(tree)} node missing identifier", loc=_loc(tree))
