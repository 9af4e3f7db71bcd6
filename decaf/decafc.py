#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
decafc: parse Decaf sources and print the resulting AST.

There is no back end; this is the front end's inspection tool. Exit status is
0 when every file builds, 1 if any file fails to parse or to build.
"""

from __future__ import annotations

import argparse
import logging
import pprint
import sys
from pathlib import Path
from typing import Optional, TextIO

from lark.exceptions import UnexpectedInput

from .ast import Program
from .compiler import generate_ast
from .errors import AstBuildError

logger: logging.Logger = logging.getLogger(__name__)


def _summary(prog: Program) -> str:
	names = ", ".join(fn.name for fn in prog.functions)
	return f"{len(prog.variables)} globals, {len(prog.functions)} functions ({names})"


def compile_file(path: Path, *, summary: bool = False, out: Optional[TextIO] = None) -> int:
	if out is None:
		out = sys.stdout
	try:
		prog = generate_ast(path.read_text())
	except UnexpectedInput as exc:
		print(f"{path}:{exc.line}:{exc.column}: syntax error", file=sys.stderr)
		return 1
	except AstBuildError as exc:
		print(f"{path}: {exc}", file=sys.stderr)
		return 1
	except OSError as exc:
		print(f"{path}: {exc}", file=sys.stderr)
		return 1
	if summary:
		print(f"[ok] {path}: {_summary(prog)}", file=out)
	else:
		print(f"== {path} ==", file=out)
		print(pprint.pformat(prog, width=100), file=out)
	return 0


def main(argv: list[str] | None = None) -> int:
	ap = argparse.ArgumentParser(description="decafc: Decaf source -> AST")
	ap.add_argument("source", type=Path, nargs="+", help="Decaf source file(s)")
	ap.add_argument("--summary", action="store_true", help="Print declaration counts instead of the full AST")
	ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	args = ap.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)

	failed = False
	for path in args.source:
		logger.debug("compiling %s", path)
		if compile_file(path, summary=args.summary) != 0:
			failed = True
	return 1 if failed else 0


if __name__ == "__main__":
	raise SystemExit(main())
