#!/usr/bin/env python3
"""Enforce barrel export budgets and geometry/runtime layering."""

from __future__ import annotations

import argparse
import ast
from pathlib import Path


DEFAULT_BUDGETS = {
    "plotgeom/__init__.py": 10,
    "plotgeom/geometry/__init__.py": 15,
    "plotgeom/runtime/__init__.py": 10,
}


def _extract_all_count(tree: ast.AST) -> int | None:
    for node in tree.body if isinstance(tree, ast.Module) else []:
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == "__all__":
                    if isinstance(node.value, (ast.List, ast.Tuple)):
                        return len(node.value.elts)
    return None


def _geometry_runtime_imports(root: Path) -> list[str]:
    violations: list[str] = []
    for path in sorted(root.glob("plotgeom/geometry/*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom) and str(node.module or "").startswith("plotgeom.runtime"):
                violations.append(f"{path.as_posix()}: geometry imports {node.module}")
    return violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check barrel export budgets.")
    parser.parse_args()

    violations: list[str] = []
    for rel_path, budget in DEFAULT_BUDGETS.items():
        path = Path(rel_path)
        if not path.exists():
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        count = _extract_all_count(tree)
        if count is not None and count > budget:
            violations.append(f"{rel_path}: __all__ size {count} exceeds budget {budget}")

    violations.extend(_geometry_runtime_imports(Path(".")))

    if violations:
        print("Barrel export budget violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
