"""
Checks the usage snippet in README.md stays self-contained.
"""

import ast
import builtins
import re
from pathlib import Path

import pytest

README = Path(__file__).parents[2] / "README.md"


def _python_blocks(text: str) -> list:
    return re.findall(r"```python\n(.*?)```", text, re.DOTALL)


def _undefined_names(source: str) -> set:
    tree = compile(
        source, str(README), "exec", flags=ast.PyCF_ONLY_AST | ast.PyCF_ALLOW_TOP_LEVEL_AWAIT
    )
    defined = set(dir(builtins))
    loaded = set()
    for node in ast.walk(tree):
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            defined.update((alias.asname or alias.name).split(".")[0] for alias in node.names)
        elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            defined.add(node.name)
        elif isinstance(node, ast.arg):
            defined.add(node.arg)
        elif isinstance(node, ast.Name):
            if isinstance(node.ctx, ast.Store):
                defined.add(node.id)
            else:
                loaded.add(node.id)
    return loaded - defined


@pytest.mark.skipif(not README.exists(), reason="README.md is not shipped with the package")
def test_usage_snippet_defines_every_name() -> None:
    blocks = _python_blocks(README.read_text())

    assert blocks
    for block in blocks:
        assert _undefined_names(block) == set()
