#!/usr/bin/env python3
"""Check the layer boundaries of the secure_admin package.

Layers and what each may import from the package:
- config/: nothing (plain settings, read by everyone)
- domain/: nothing
- application/: domain/
- infrastructure/: domain/, application/, config/
- api/: domain/, application/

bootstrap/ wires everything together and is not checked.

Relative imports are resolved against the importing module before the
rules are applied, and every name of a multi-name import is checked.

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path
from typing import NamedTuple

PACKAGE_NAME = "secure_admin"

ALLOWED_IMPORTS: dict[str, frozenset[str]] = {
    "config": frozenset(),
    "domain": frozenset(),
    "application": frozenset({"domain"}),
    "infrastructure": frozenset({"domain", "application", "config"}),
    "api": frozenset({"domain", "application"}),
}


class Violation(NamedTuple):
    path: str
    line: int
    message: str


def module_name(py_file: Path, package_dir: Path) -> str:
    """Dotted name of py_file inside the package, e.g. secure_admin.domain.models."""
    parts = list(py_file.relative_to(package_dir).with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join([PACKAGE_NAME, *parts])


def resolve_imports(
    node: ast.Import | ast.ImportFrom, importer: str, is_package: bool
) -> list[str]:
    """Return the absolute module names an import statement refers to.

    Args:
        node: The import statement.
        importer: Dotted name of the importing module.
        is_package: True when the importer is an __init__ module.
    """
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]

    if node.level == 0:
        return [node.module] if node.module else []

    base = importer.split(".")
    if not is_package:
        base = base[:-1]
    base = base[: len(base) - (node.level - 1)]
    if node.module:
        return [".".join([*base, node.module])]
    # "from . import x" may name submodules
    return [".".join([*base, alias.name]) for alias in node.names]


def layer_of(module: str) -> str | None:
    parts = module.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE_NAME:
        return None
    return parts[1] if parts[1] in ALLOWED_IMPORTS else None


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Check one file of the package for layer violations."""
    importer = module_name(py_file, package_dir)
    file_layer = layer_of(importer)
    if file_layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    allowed = ALLOWED_IMPORTS[file_layer]
    is_package = py_file.name == "__init__.py"
    violations: list[Violation] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for target in resolve_imports(node, importer, is_package):
            target_layer = layer_of(target)
            if target_layer is None or target_layer == file_layer:
                continue
            if target_layer not in allowed:
                violations.append(
                    Violation(
                        str(py_file),
                        node.lineno,
                        f"{file_layer} layer cannot import from {target_layer}",
                    )
                )
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    """Check every module under package_dir."""
    if not package_dir.exists():
        print(
            f"Error: Package directory '{package_dir}' does not exist",
            file=sys.stderr,
        )
        return []

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Import boundary violations found:", ""]
    lines.extend(f"  {v.path}:{v.line}: {v.message}" for v in sorted(violations))
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main() -> int:
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE_NAME

    violations = check_import_boundaries(package_dir)
    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
