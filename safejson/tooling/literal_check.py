"""
Static check that json_from_constant() only ever receives string literals.

json_from_constant() trusts its argument verbatim, so passing it a runtime
string would launder untrusted text into a SafeJSON. Type checkers catch this
through the LiteralString annotation; this check catches it in code that is
not type-checked, and is meant to run in CI:

    safejson-literal-check src/ tests/
"""

import argparse
import ast
import logging
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONSTANT_CONSTRUCTOR = "json_from_constant"


@dataclass(frozen=True)
class Violation:
    """A call to the constant constructor with a non-literal argument."""

    filename: str
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}: {self.message}"


def _describe(node: ast.expr) -> str:
    if isinstance(node, ast.JoinedStr):
        return "an f-string"
    if isinstance(node, ast.Name):
        return f"variable '{node.id}'"
    if isinstance(node, ast.Call):
        return "a call result"
    if isinstance(node, ast.BinOp):
        return "a computed expression"
    if isinstance(node, ast.Constant):
        return f"a {type(node.value).__name__} constant"
    return f"a {type(node).__name__} expression"


def _is_string_literal(node: ast.expr) -> bool:
    # Adjacent literals ("a" "b") are already folded into one Constant.
    return isinstance(node, ast.Constant) and isinstance(node.value, str)


class _ConstantCallVisitor(ast.NodeVisitor):
    def __init__(self, filename: str):
        self.filename = filename
        self.violations: list[Violation] = []
        self.local_names = {CONSTANT_CONSTRUCTOR}

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        for alias in node.names:
            if alias.name == CONSTANT_CONSTRUCTOR and alias.asname:
                self.local_names.add(alias.asname)
        self.generic_visit(node)

    def _is_constant_constructor(self, func: ast.expr) -> bool:
        if isinstance(func, ast.Name):
            return func.id in self.local_names
        if isinstance(func, ast.Attribute):
            return func.attr == CONSTANT_CONSTRUCTOR
        return False

    def visit_Call(self, node: ast.Call) -> None:
        if self._is_constant_constructor(node.func):
            self._check_arguments(node)
        self.generic_visit(node)

    def _check_arguments(self, node: ast.Call) -> None:
        arguments = list(node.args) + [kw.value for kw in node.keywords]
        if len(arguments) != 1 or isinstance(arguments[0], ast.Starred):
            self._report(node, f"{CONSTANT_CONSTRUCTOR}() takes exactly one string literal")
            return
        argument = arguments[0]
        if not _is_string_literal(argument):
            self._report(
                argument,
                f"{CONSTANT_CONSTRUCTOR}() called with {_describe(argument)}; "
                "use json_from_value() or json_escaped() for runtime text",
            )

    def _report(self, node: ast.AST, message: str) -> None:
        self.violations.append(
            Violation(
                filename=self.filename,
                line=getattr(node, "lineno", 0),
                column=getattr(node, "col_offset", 0) + 1,
                message=message,
            )
        )


def find_violations(source: str, filename: str = "<string>") -> list[Violation]:
    """
    Find calls to json_from_constant() whose argument is not a string literal.

    Raises:
        SyntaxError: If source is not valid Python
    """
    tree = ast.parse(source, filename=filename)
    visitor = _ConstantCallVisitor(filename)
    visitor.visit(tree)
    return visitor.violations


def iter_python_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield Python files under each path, in a stable order."""
    for path in paths:
        if path.is_dir():
            yield from sorted(path.rglob("*.py"))
        else:
            yield path


def check_paths(paths: Iterable[Path]) -> tuple[list[Violation], list[str]]:
    """
    Check every Python file under paths.

    Returns:
        (violations, errors) where errors describe files that could not be
        read or parsed
    """
    violations: list[Violation] = []
    errors: list[str] = []

    for path in iter_python_files(paths):
        try:
            source = path.read_text(encoding="utf-8")
            violations.extend(find_violations(source, str(path)))
        except (OSError, UnicodeDecodeError, SyntaxError) as exc:
            logger.warning(f"Skipping {path}: {exc}")
            errors.append(f"{path}: {exc}")

    return violations, errors


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="safejson-literal-check",
        description=(
            f"Report calls to {CONSTANT_CONSTRUCTOR}() that are not passed "
            "a string literal"
        ),
        epilog=(
            "Exit status is 1 if any violation was found, 2 if a file could "
            "not be read or parsed, and 0 otherwise."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Python files or directories to check",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    violations, errors = check_paths(args.paths)

    for violation in violations:
        print(violation)
    for error in errors:
        print(error, file=sys.stderr)

    if violations:
        return 1
    if errors:
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
