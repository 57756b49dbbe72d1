#!/usr/bin/env python3
"""
Guard the layering of src/microcms_mcp/core/.

- core must not import transport-specific modules
- core must stay read-only against the content API (no write verbs)
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "microcms_mcp" / "core"

FORBIDDEN_PREFIXES = (
    "starlette",
    "uvicorn",
    "mcp.server",
    "fastmcp",
    "microcms_mcp.transports",
)

WRITE_METHODS = {"post", "put", "patch", "delete"}
WRITE_VERBS = {m.upper() for m in WRITE_METHODS}


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def _import_errors(path: Path, node: ast.AST) -> list[str]:
    if isinstance(node, ast.Import):
        names = [alias.name for alias in node.names]
    elif isinstance(node, ast.ImportFrom):
        names = [node.module or ""]
    else:
        return []
    return [f"{path}: forbidden import '{n}'" for n in names if n and is_forbidden(n)]


def _write_call_errors(path: Path, node: ast.AST) -> list[str]:
    if not isinstance(node, ast.Call):
        return []
    func = node.func
    if isinstance(func, ast.Attribute) and func.attr in WRITE_METHODS:
        return [f"{path}:{node.lineno}: write call '.{func.attr}()'"]
    for arg in node.args[:1]:
        if isinstance(arg, ast.Constant) and arg.value in WRITE_VERBS:
            return [f"{path}:{node.lineno}: write verb '{arg.value}'"]
    return []


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        errors.extend(_import_errors(path, node))
        errors.extend(_write_call_errors(path, node))
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in sorted(CORE_DIR.rglob("*.py")):
        violations.extend(scan_file(py_file))

    for v in violations:
        print(v, file=sys.stderr)
    return 1 if violations else 0


if __name__ == "__main__":
    sys.exit(main())
