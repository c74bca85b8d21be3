#!/usr/bin/env python3
"""Check hexagonal architecture import boundaries for govmeta.

Layering rules:
- domain/: Field schema, document model, errors. NO imports from other layers
- application/: Ports, extraction service, DTOs. May import from domain/ only
- infrastructure/: Adapters and observability. May import from domain/ and application/
- bootstrap/: Composition root. May import from every layer

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path

PACKAGE_NAME = "govmeta"

# Layer hierarchy: lower number = more inner layer (more protected)
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "application": 1,
    "infrastructure": 2,
    "bootstrap": 3,
}

# Explicit import rules: what each layer CAN import from
ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "application": {"domain"},
    "infrastructure": {"domain", "application"},
    "bootstrap": {"domain", "application", "infrastructure"},
}


def get_import_module(node: ast.Import | ast.ImportFrom) -> str | None:
    """Extract the module name from an import statement."""
    if isinstance(node, ast.ImportFrom):
        return node.module
    if isinstance(node, ast.Import) and node.names:
        return node.names[0].name
    return None


def _get_file_layer(py_file: Path, package_dir: Path) -> str | None:
    """Determine the architectural layer of a file.

    Args:
        py_file: Path to the Python file
        package_dir: Path to the govmeta package directory

    Returns:
        The layer name or None if the file is outside every layer
    """
    try:
        relative = py_file.relative_to(package_dir)
    except ValueError:
        return None

    parts = relative.parts
    if not parts:
        return None

    file_layer = parts[0]
    return file_layer if file_layer in LAYER_HIERARCHY else None


def _parse_file(py_file: Path) -> ast.Module | None:
    try:
        source = py_file.read_text(encoding="utf-8")
        return ast.parse(source, filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return None


def _check_import_violation(
    module: str, file_layer: str, allowed_layers: set[str]
) -> str | None:
    """Check if an import violates layer boundaries.

    Args:
        module: The import module string (e.g., "govmeta.domain.models")
        file_layer: The layer the importing file belongs to
        allowed_layers: Set of layers this file is allowed to import from

    Returns:
        Error message if violation detected, None otherwise
    """
    if not module.startswith(f"{PACKAGE_NAME}."):
        return None

    target_layer = module.split(".")[1]
    if target_layer not in LAYER_HIERARCHY:
        return None

    if target_layer == file_layer:
        return None

    if target_layer not in allowed_layers:
        return f"{file_layer} layer cannot import from {target_layer}"

    return None


def check_file_imports(
    py_file: Path, package_dir: Path
) -> list[tuple[str, int, str]]:
    """Check a single file for import boundary violations.

    Returns:
        List of (file_path, line_number, violation_message) tuples
    """
    file_layer = _get_file_layer(py_file, package_dir)
    if file_layer is None:
        return []

    tree = _parse_file(py_file)
    if tree is None:
        return []

    violations: list[tuple[str, int, str]] = []
    allowed_layers = ALLOWED_IMPORTS.get(file_layer, set())

    for node in ast.walk(tree):
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            module = get_import_module(node)
            if module:
                error_msg = _check_import_violation(module, file_layer, allowed_layers)
                if error_msg:
                    violations.append((str(py_file), node.lineno, error_msg))

    return violations


def check_import_boundaries(package_dir: Path) -> list[tuple[str, int, str]]:
    """Check every Python file in the package for boundary violations."""
    violations: list[tuple[str, int, str]] = []

    if not package_dir.exists():
        print(f"Error: Package directory '{package_dir}' does not exist", file=sys.stderr)
        return violations

    for py_file in package_dir.rglob("*.py"):
        violations.extend(check_file_imports(py_file, package_dir))

    return violations


def format_violations(violations: list[tuple[str, int, str]]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Import boundary violations found:", ""]
    for file_path, line_no, message in sorted(violations):
        lines.append(f"  {file_path}:{line_no}: {message}")
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main() -> int:
    """Main entry point.

    Returns:
        0 if no violations, 1 if violations found
    """
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
