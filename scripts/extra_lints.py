#!/usr/bin/env python3
"""Project-specific lint rules that ruff does not cover.

Rules:
1. no-class-tests: tests are module-level functions; only Hypothesis state
   machines may be classes (exposed through their ``.TestCase``)
2. import-in-function: imports live at module level
3. mutable-default: no list/dict/set default arguments
4. no-print: library code logs through ``logging``, never ``print()``
5. todo-needs-issue: TODO/FIXME comments carry an issue reference (#123)
6. no-global-random: library code draws numbers only through the
   generator's injectable random source, never by calling the global
   ``random`` module directly

Usage: python scripts/extra_lints.py [paths...]
"""

import ast
import re
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATHS = ("src", "tests")
MUTABLE_FACTORIES = frozenset({"list", "dict", "set"})
TODO_PATTERN = re.compile(r"#\s*(TODO|FIXME)(?!\S*\s*\(?#\d+)", re.IGNORECASE)


@dataclass
class LintError:
    file: Path
    line: int
    column: int
    rule: str
    message: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}: {self.rule}: {self.message}"


class LintVisitor(ast.NodeVisitor):
    """AST visitor collecting rule violations for one file."""

    def __init__(self, file: Path) -> None:
        self.file = file
        self.errors: list[LintError] = []
        self._is_test_file = file.name.startswith("test_") or file.name == "conftest.py"
        self._function_depth = 0

    def _add_error(self, node: ast.AST, rule: str, message: str) -> None:
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        self.errors.append(LintError(self.file, lineno, col_offset, rule, message))

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        # Hypothesis state machines may be exposed as Machine.TestCase subclasses
        is_hypothesis_stateful = any(
            isinstance(base, ast.Attribute) and base.attr == "TestCase"
            for base in node.bases
        )
        if (
            self._is_test_file
            and node.name.startswith("Test")
            and not is_hypothesis_stateful
        ):
            msg = f"Class-based test '{node.name}' found. Use functions."
            self._add_error(node, "no-class-tests", msg)
        self.generic_visit(node)

    def _visit_function(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        for default in node.args.defaults + node.args.kw_defaults:
            if default is not None and _is_mutable_default(default):
                msg = "Mutable default argument. Use None instead."
                self._add_error(default, "mutable-default", msg)

        self._function_depth += 1
        self.generic_visit(node)
        self._function_depth -= 1

    visit_FunctionDef = _visit_function
    visit_AsyncFunctionDef = _visit_function

    def _visit_import(self, node: ast.Import | ast.ImportFrom) -> None:
        if self._function_depth > 0:
            msg = "Import inside function. Move to module level."
            self._add_error(node, "import-in-function", msg)
        if (
            not self._is_test_file
            and isinstance(node, ast.ImportFrom)
            and node.module == "random"
        ):
            msg = "Import the random module itself, not names from it."
            self._add_error(node, "no-global-random", msg)
        self.generic_visit(node)

    visit_Import = _visit_import
    visit_ImportFrom = _visit_import

    def visit_Call(self, node: ast.Call) -> None:
        if not self._is_test_file:
            func = node.func
            if isinstance(func, ast.Name) and func.id == "print":
                msg = "Use logging instead of print() in library code."
                self._add_error(node, "no-print", msg)
            elif (
                isinstance(func, ast.Attribute)
                and isinstance(func.value, ast.Name)
                and func.value.id == "random"
            ):
                msg = f"random.{func.attr}() bypasses the injectable random source."
                self._add_error(node, "no-global-random", msg)
        self.generic_visit(node)


def _is_mutable_default(node: ast.expr) -> bool:
    if isinstance(node, (ast.List, ast.Dict, ast.Set)):
        return True
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id in MUTABLE_FACTORIES
    )


def check_todo_comments(file: Path, source: str) -> list[LintError]:
    errors: list[LintError] = []
    for i, line in enumerate(source.splitlines(), 1):
        match = TODO_PATTERN.search(line)
        if match:
            msg = f"{match.group(1)} needs an issue reference, e.g. TODO(#123)."
            errors.append(LintError(file, i, match.start(), "todo-needs-issue", msg))
    return errors


def lint_file(path: Path) -> list[LintError]:
    """Lint a single file and return any errors."""
    source = path.read_text()
    try:
        tree = ast.parse(source)
    except SyntaxError as e:
        return [LintError(path, e.lineno or 0, e.offset or 0, "syntax-error", str(e))]

    visitor = LintVisitor(path)
    visitor.visit(tree)
    return visitor.errors + check_todo_comments(path, source)


def main(argv: list[str]) -> int:
    errors: list[LintError] = []
    for directory in argv or DEFAULT_PATHS:
        dir_path = Path(directory)
        if not dir_path.exists():
            continue
        for py_file in sorted(dir_path.rglob("*.py")):
            errors.extend(lint_file(py_file))

    if errors:
        for error in sorted(errors, key=lambda e: (str(e.file), e.line, e.column)):
            print(error)
        print(f"\nFound {len(errors)} custom lint error(s)")
        return 1

    print("All custom lint checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
